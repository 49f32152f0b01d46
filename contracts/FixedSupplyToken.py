import smartpy as sp

from contracts.FA2 import fa2


@sp.module
def fixed_supply_token():
    import fa2

    class FixedSupplyToken(fa2.Ledger):
        """Fungible FA2 token, token id 0.

        The whole supply is credited to `recipient` at origination and
        can never be minted or burned afterwards.
        """

        def __init__(self, metadata, recipient, total_supply):
            sp.cast(recipient, sp.address)
            sp.cast(total_supply, sp.nat)
            fa2.Ledger.__init__(self, metadata, sp.big_map({(recipient, 0): total_supply}))
            self.data.total_supply = total_supply

        @sp.onchain_view()
        def total_supply(self, token_id):
            sp.cast(token_id, sp.nat)
            if token_id == 0:
                return self.data.total_supply
            else:
                return 0
