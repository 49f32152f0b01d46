import smartpy as sp


@sp.module
def reentrancy_guard():
    class ReentrancyGuard(sp.Contract):
        """(Mixin) Lock held from entry of a guarded entrypoint until its
        outgoing operations have run.

        Guarded entrypoints call `lock_()` first and `unlock_()` after their
        last outgoing transfer. `unlock_()` emits a self-call to
        `release_lock`. Operations run depth-first, so anything the outgoing
        transfers trigger executes while the lock is held, and a nested
        guarded call fails with REENTRANT.
        """

        def __init__(self):
            self.data.locked = False

        @sp.private(with_storage="read-write")
        def lock_(self):
            assert not self.data.locked, "REENTRANT"
            self.data.locked = True

        @sp.private(with_operations=True)
        def unlock_(self):
            release_lock = sp.contract(sp.unit, sp.self_address, entrypoint="release_lock").unwrap_some()
            sp.transfer((), sp.mutez(0), release_lock)

        @sp.entrypoint
        def release_lock(self):
            assert sp.sender == sp.self_address, "ONLY_SELF"
            self.data.locked = False
