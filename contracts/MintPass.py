import smartpy as sp

from contracts.FA2 import fa2
from contracts.mixins.Administrable import administrable
from contracts.mixins.ReentrancyGuard import reentrancy_guard


@sp.module
def mint_pass():
    import fa2
    import administrable
    import reentrancy_guard

    # A pass type. Ids not in the passes map don't exist, price is never 0.
    t_mint_pass: type = sp.record(
        price=sp.mutez,
        in_circulation=sp.nat,
        artist_revenue=sp.mutez,
        artist_address=sp.option[sp.address],
        burner_authority=sp.option[sp.address],
        minting_closed=sp.bool,
    ).layout(("price", ("in_circulation", ("artist_revenue",
        ("artist_address", ("burner_authority", "minting_closed"))))))

    #
    # Mint pass base. Pass type administration, burn and views.
    # The variants add mint and their own revenue routing.
    class MintPassBase(
        administrable.Administrable,
        reentrancy_guard.ReentrancyGuard,
        fa2.Ledger,
    ):
        def __init__(self, administrator, burn_address, split_basis_points, metadata):
            self.data.passes = sp.cast(sp.big_map(), sp.big_map[sp.nat, t_mint_pass])
            self.data.pass_type_count = sp.nat(0)
            self.data.burn_address = sp.cast(burn_address, sp.address)
            # Share of each mint burned, in basis points of the mint cost.
            self.data.split_basis_points = sp.cast(split_basis_points, sp.nat)

            fa2.Ledger.__init__(self, metadata, sp.big_map())
            reentrancy_guard.ReentrancyGuard.__init__(self)
            administrable.Administrable.__init__(self, administrator)

        #
        # Admin-only entry points
        #
        @sp.entrypoint
        def create_pass_type(self, pass_id, price, minting_closed):
            """Create a new pass type with zero circulation."""
            sp.cast(pass_id, sp.nat)
            sp.cast(price, sp.mutez)
            sp.cast(minting_closed, sp.bool)

            assert self.is_administrator_(), "ONLY_ADMIN"
            # Pass types are never overwritten.
            assert not (pass_id in self.data.passes), "PASS_EXISTS"
            assert price > sp.mutez(0), "PARAM_ERROR"

            self.data.passes[pass_id] = sp.record(
                price=price,
                in_circulation=0,
                artist_revenue=sp.mutez(0),
                artist_address=None,
                burner_authority=None,
                minting_closed=minting_closed,
            )
            self.data.pass_type_count += 1

            sp.emit(
                sp.record(pass_id=pass_id, price=price, minting_closed=minting_closed),
                tag="pass_type_created",
            )

        @sp.entrypoint
        def edit_price(self, pass_id, price):
            sp.cast(pass_id, sp.nat)
            sp.cast(price, sp.mutez)

            assert self.is_administrator_(), "ONLY_ADMIN"
            assert pass_id in self.data.passes, "PASS_NOT_FOUND"
            assert price > sp.mutez(0), "PARAM_ERROR"

            self.data.passes[pass_id].price = price
            sp.emit(sp.record(pass_id=pass_id, price=price), tag="price_changed")

        @sp.entrypoint
        def edit_mint_gate(self, pass_id, minting_closed):
            sp.cast(pass_id, sp.nat)
            sp.cast(minting_closed, sp.bool)

            assert self.is_administrator_(), "ONLY_ADMIN"
            assert pass_id in self.data.passes, "PASS_NOT_FOUND"

            self.data.passes[pass_id].minting_closed = minting_closed
            sp.emit(
                sp.record(pass_id=pass_id, minting_closed=minting_closed),
                tag="mint_gate_changed",
            )

        @sp.entrypoint
        def edit_burner_authority(self, pass_id, burner_authority):
            """Set the contract allowed to burn passes of this type. None disables burning."""
            sp.cast(pass_id, sp.nat)
            sp.cast(burner_authority, sp.option[sp.address])

            assert self.is_administrator_(), "ONLY_ADMIN"
            assert pass_id in self.data.passes, "PASS_NOT_FOUND"

            self.data.passes[pass_id].burner_authority = burner_authority
            sp.emit(
                sp.record(pass_id=pass_id, burner_authority=burner_authority),
                tag="burner_authority_changed",
            )

        @sp.entrypoint
        def edit_artist_address(self, pass_id, artist_address):
            sp.cast(pass_id, sp.nat)
            sp.cast(artist_address, sp.option[sp.address])

            assert self.is_administrator_(), "ONLY_ADMIN"
            assert pass_id in self.data.passes, "PASS_NOT_FOUND"

            self.data.passes[pass_id].artist_address = artist_address
            sp.emit(
                sp.record(pass_id=pass_id, artist_address=artist_address),
                tag="artist_address_changed",
            )

        #
        # Burner-only entry points
        #
        @sp.entrypoint
        def burn_and_redeem(self, pass_id, amount):
            """Burn `amount` passes held by the originator of the operation.

            Only callable by the pass's burner authority. The burn applies to
            sp.source, not sp.sender, so a redeem contract can call this on
            behalf of the user that initiated the operation. The amount
            burned is reported in the `burnt` event.
            """
            sp.cast(pass_id, sp.nat)
            sp.cast(amount, sp.nat)

            assert pass_id in self.data.passes, "PASS_NOT_FOUND"
            the_pass = self.data.passes[pass_id]
            assert the_pass.burner_authority == sp.Some(sp.sender), "NOT_BURNER"

            owner_key = (sp.source, pass_id)
            owner_balance = self.data.ledger.get(owner_key, default=0)
            assert owner_balance >= amount, "INSUFFICIENT_BALANCE"

            self.data.ledger[owner_key] = sp.as_nat(owner_balance - amount)
            self.data.passes[pass_id].in_circulation = sp.as_nat(the_pass.in_circulation - amount)

            sp.emit(
                sp.record(pass_id=pass_id, owner=sp.source, amount=amount),
                tag="burnt",
            )

        #
        # Helpers
        #
        @sp.private(with_storage="read-write")
        def issue_(self, params):
            """Credit `params.amount` passes of `params.pass_id` to the sender.

            Fails if the pass type doesn't exist, minting is closed or the
            amount is 0. Returns the price of the passes issued, the caller
            checks the payment.
            """
            sp.cast(params, sp.record(pass_id=sp.nat, amount=sp.nat))
            assert params.pass_id in self.data.passes, "PASS_NOT_FOUND"
            the_pass = self.data.passes[params.pass_id]
            assert not the_pass.minting_closed, "MINTING_CLOSED"
            assert params.amount > 0, "PARAM_ERROR"

            owner_key = (sp.sender, params.pass_id)
            self.data.ledger[owner_key] = self.data.ledger.get(owner_key, default=0) + params.amount
            self.data.passes[params.pass_id].in_circulation += params.amount
            return sp.split_tokens(the_pass.price, params.amount, 1)

        @sp.private(with_storage="read-only")
        def split_(self, total_cost):
            return sp.split_tokens(total_cost, self.data.split_basis_points, 10000)

        #
        # Views
        #
        @sp.onchain_view()
        def get_mint_pass(self, pass_id):
            sp.cast(pass_id, sp.nat)
            assert pass_id in self.data.passes, "PASS_NOT_FOUND"
            return self.data.passes[pass_id]

        @sp.onchain_view()
        def get_circulation_count(self, pass_id):
            sp.cast(pass_id, sp.nat)
            assert pass_id in self.data.passes, "PASS_NOT_FOUND"
            return self.data.passes[pass_id].in_circulation


    #
    # Mint pass. Revenue goes straight out on mint:
    # the split to the burn address, the rest to the revenue recipient.
    class MintPass(MintPassBase):
        def __init__(self, administrator, burn_address, revenue_recipient, split_basis_points, metadata):
            self.data.revenue_recipient = sp.cast(revenue_recipient, sp.address)
            MintPassBase.__init__(self, administrator, burn_address, split_basis_points, metadata)

        @sp.entrypoint
        def set_revenue_recipient(self, revenue_recipient):
            sp.cast(revenue_recipient, sp.address)
            assert self.is_administrator_(), "ONLY_ADMIN"
            self.data.revenue_recipient = revenue_recipient

        @sp.entrypoint
        def mint(self, pass_id, amount):
            """Mint `amount` passes to the sender. Must be paid exactly."""
            sp.cast(pass_id, sp.nat)
            sp.cast(amount, sp.nat)

            self.lock_()

            total_cost = self.issue_(sp.record(pass_id=pass_id, amount=amount))
            assert sp.amount == total_cost, "WRONG_AMOUNT"

            burn_share = self.split_(total_cost)
            revenue_share = total_cost - burn_share
            if burn_share > sp.mutez(0):
                sp.send(self.data.burn_address, burn_share)
            if revenue_share > sp.mutez(0):
                sp.send(self.data.revenue_recipient, revenue_share)

            sp.emit(
                sp.record(pass_id=pass_id, owner=sp.sender, amount=amount, total_cost=total_cost),
                tag="minted",
            )

            self.unlock_()
