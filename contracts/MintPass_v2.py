import smartpy as sp

from contracts.MintPass import mint_pass


@sp.module
def mint_pass_v2():
    import mint_pass

    #
    # Mint pass v2. Revenue is split on mint and held until claimed.
    #
    # For a mint costing `total`, `split = total * split_basis_points / 10000`
    # (rounded down). The minter pays `total - split`:
    # - `split` goes to the burn address,
    # - `total - 2 * split` stays in the contract,
    # - the pass's artist accrues `split`,
    # - dev and treasury each accrue `split / 2` (rounded down).
    #
    # Accruals are not backed one to one. Their sum can exceed the balance,
    # in which case a claim fails until enough tez is in the contract.
    class MintPass_v2(mint_pass.MintPassBase):
        def __init__(self, administrator, burn_address, split_basis_points, metadata):
            self.data.dev_address = sp.cast(None, sp.option[sp.address])
            self.data.treasury_address = sp.cast(None, sp.option[sp.address])
            self.data.dev_accrued = sp.mutez(0)
            self.data.treasury_accrued = sp.mutez(0)
            mint_pass.MintPassBase.__init__(self, administrator, burn_address, split_basis_points, metadata)

        #
        # Admin-only entry points
        #
        @sp.entrypoint
        def set_dev_address(self, dev_address):
            sp.cast(dev_address, sp.option[sp.address])
            assert self.is_administrator_(), "ONLY_ADMIN"
            self.data.dev_address = dev_address

        @sp.entrypoint
        def set_treasury_address(self, treasury_address):
            sp.cast(treasury_address, sp.option[sp.address])
            assert self.is_administrator_(), "ONLY_ADMIN"
            self.data.treasury_address = treasury_address

        #
        # Public entry points
        #
        @sp.entrypoint
        def mint(self, pass_id, amount):
            """Mint `amount` passes to the sender.

            Must be paid exactly the mint cost less the split.
            """
            sp.cast(pass_id, sp.nat)
            sp.cast(amount, sp.nat)

            self.lock_()

            total_cost = self.issue_(sp.record(pass_id=pass_id, amount=amount))
            split = self.split_(total_cost)
            assert sp.amount == total_cost - split, "WRONG_AMOUNT"

            pool_share = sp.split_tokens(split, 1, 2)
            self.data.passes[pass_id].artist_revenue += split
            self.data.dev_accrued += pool_share
            self.data.treasury_accrued += pool_share

            if split > sp.mutez(0):
                sp.send(self.data.burn_address, split)

            sp.emit(
                sp.record(pass_id=pass_id, owner=sp.sender, amount=amount, total_cost=total_cost),
                tag="minted",
            )

            self.unlock_()

        @sp.entrypoint
        def claim_dev(self):
            """Send all dev revenue to the dev address. Does nothing if it isn't set."""
            self.lock_()

            if self.data.dev_address.is_some():
                claimed = self.data.dev_accrued
                self.data.dev_accrued = sp.mutez(0)
                if claimed > sp.mutez(0):
                    sp.send(self.data.dev_address.unwrap_some(), claimed)

            self.unlock_()

        @sp.entrypoint
        def claim_love_treasury(self):
            """Send all treasury revenue to the treasury address. Does nothing if it isn't set."""
            self.lock_()

            if self.data.treasury_address.is_some():
                claimed = self.data.treasury_accrued
                self.data.treasury_accrued = sp.mutez(0)
                if claimed > sp.mutez(0):
                    sp.send(self.data.treasury_address.unwrap_some(), claimed)

            self.unlock_()

        @sp.entrypoint
        def claim_artist(self, pass_id):
            """Send a pass's artist revenue to its artist. Does nothing if no artist is set."""
            sp.cast(pass_id, sp.nat)

            self.lock_()

            assert pass_id in self.data.passes, "PASS_NOT_FOUND"
            the_pass = self.data.passes[pass_id]
            if the_pass.artist_address.is_some():
                self.data.passes[pass_id].artist_revenue = sp.mutez(0)
                if the_pass.artist_revenue > sp.mutez(0):
                    sp.send(the_pass.artist_address.unwrap_some(), the_pass.artist_revenue)

            self.unlock_()

        #
        # Views
        #
        @sp.onchain_view()
        def get_accrued(self):
            """Unclaimed dev and treasury revenue."""
            return sp.record(dev=self.data.dev_accrued, treasury=self.data.treasury_accrued)
