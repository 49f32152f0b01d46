import smartpy as sp


@sp.module
def administrable():
    class Administrable(sp.Contract):
        """(Mixin) Single administrator gate.

        Contracts check `is_administrator_()` before any admin-only change.
        """

        def __init__(self, administrator):
            self.data.administrator = sp.cast(administrator, sp.address)

        @sp.private(with_storage="read-only")
        def is_administrator_(self):
            return sp.sender == self.data.administrator

        @sp.onchain_view()
        def get_administrator(self):
            return self.data.administrator
