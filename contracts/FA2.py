"""
FA2 standard: https://gitlab.com/tezos/tzip/-/blob/master/proposals/tzip-12/tzip-12.md. <br/>

Minimal multi-asset ledger shared by the mint pass and fixed supply
contracts. Issuance and destruction are left to the inheriting contract,
which writes to `self.data.ledger` directly.
"""

import smartpy as sp


@sp.module
def fa2():
    #########
    # Types #
    #########

    t_operator_permission: type = sp.record(
        owner=sp.address, operator=sp.address, token_id=sp.nat
    ).layout(("owner", ("operator", "token_id")))

    t_update_operators_params: type = sp.list[
        sp.variant(
            add_operator=t_operator_permission,
            remove_operator=t_operator_permission,
        )
    ]

    t_transfer_tx: type = sp.record(
        to_=sp.address,
        token_id=sp.nat,
        amount=sp.nat,
    ).layout(("to_", ("token_id", "amount")))

    t_transfer_batch: type = sp.record(
        from_=sp.address,
        txs=sp.list[t_transfer_tx],
    ).layout(("from_", "txs"))

    t_transfer_params: type = sp.list[t_transfer_batch]

    t_balance_of_request: type = sp.record(
        owner=sp.address, token_id=sp.nat
    ).layout(("owner", "token_id"))

    t_balance_of_response: type = sp.record(
        request=t_balance_of_request, balance=sp.nat
    ).layout(("request", "balance"))

    t_balance_of_params: type = sp.record(
        callback=sp.contract[sp.list[t_balance_of_response]],
        requests=sp.list[t_balance_of_request],
    ).layout(("requests", "callback"))

    t_ledger: type = sp.big_map[sp.pair[sp.address, sp.nat], sp.nat]

    ##########
    # Ledger #
    ##########

    class Ledger(sp.Contract):
        """Balances, operators and the standard entrypoints.

        Operators are per owner, operator and token id. A token id
        nobody was ever credited with reads as a zero balance.
        """

        def __init__(self, metadata, ledger):
            self.data.metadata = sp.cast(metadata, sp.big_map[sp.string, sp.bytes])
            self.data.ledger = sp.cast(ledger, t_ledger)
            self.data.operators = sp.cast(
                sp.big_map(), sp.big_map[t_operator_permission, sp.unit]
            )

        @sp.entrypoint
        def transfer(self, batch):
            sp.cast(batch, t_transfer_params)
            for transfer in batch:
                for tx in transfer.txs:
                    assert (transfer.from_ == sp.sender) or (
                        sp.record(
                            owner=transfer.from_,
                            operator=sp.sender,
                            token_id=tx.token_id,
                        )
                        in self.data.operators
                    ), "FA2_NOT_OPERATOR"
                    if tx.amount > 0:
                        from_key = (transfer.from_, tx.token_id)
                        from_balance = self.data.ledger.get(from_key, default=0)
                        assert from_balance >= tx.amount, "FA2_INSUFFICIENT_BALANCE"
                        self.data.ledger[from_key] = sp.as_nat(from_balance - tx.amount)
                        to_key = (tx.to_, tx.token_id)
                        self.data.ledger[to_key] = (
                            self.data.ledger.get(to_key, default=0) + tx.amount
                        )

        @sp.entrypoint
        def balance_of(self, params):
            sp.cast(params, t_balance_of_params)
            responses = []
            for req in params.requests:
                responses.push(
                    sp.record(
                        request=req,
                        balance=self.data.ledger.get((req.owner, req.token_id), default=0),
                    )
                )
            sp.transfer(responses, sp.mutez(0), params.callback)

        @sp.entrypoint
        def update_operators(self, actions):
            sp.cast(actions, t_update_operators_params)
            for action in actions:
                match action:
                    case add_operator(operator):
                        assert operator.owner == sp.sender, "FA2_NOT_OWNER"
                        self.data.operators[operator] = ()
                    case remove_operator(operator):
                        assert operator.owner == sp.sender, "FA2_NOT_OWNER"
                        del self.data.operators[operator]

        @sp.onchain_view()
        def get_balance(self, params):
            sp.cast(params, t_balance_of_request)
            return self.data.ledger.get((params.owner, params.token_id), default=0)
