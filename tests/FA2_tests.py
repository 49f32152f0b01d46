import smartpy as sp

from contracts.FixedSupplyToken import fixed_supply_token
from contracts.utils import ErrorMessages


def balance(token, owner, token_id=0):
    return sp.View(token, "get_balance")(sp.record(owner=owner.address, token_id=token_id))


@sp.add_test()
def test():
    admin = sp.test_account("Administrator")
    alice = sp.test_account("Alice")
    bob   = sp.test_account("Robert")
    carol = sp.test_account("Carol")
    sc = sp.test_scenario("FA2_tests")

    sc.h1("FA2 Ledger Tests")

    sc.h1("Create test env")
    token = fixed_supply_token.FixedSupplyToken(
        metadata=sp.scenario_utils.metadata_of_url("ipfs://example"),
        recipient=alice.address,
        total_supply=sp.nat(1000))
    sc += token

    sc.verify(balance(token, alice) == 1000)
    sc.verify(balance(token, bob) == 0)
    # unknown token ids read as zero
    sc.verify(balance(token, alice, 7) == 0)

    #
    # transfer
    #
    sc.h2("transfer")

    token.transfer([sp.record(from_=alice.address,
        txs=[sp.record(to_=bob.address, token_id=0, amount=100)])], _sender=alice)
    sc.verify(balance(token, alice) == 900)
    sc.verify(balance(token, bob) == 100)

    # several txs in one batch
    token.transfer([sp.record(from_=alice.address, txs=[
        sp.record(to_=bob.address, token_id=0, amount=10),
        sp.record(to_=carol.address, token_id=0, amount=20)])], _sender=alice)
    sc.verify(balance(token, alice) == 870)
    sc.verify(balance(token, bob) == 110)
    sc.verify(balance(token, carol) == 20)

    # zero amount transfers are allowed
    token.transfer([sp.record(from_=bob.address,
        txs=[sp.record(to_=carol.address, token_id=0, amount=0)])], _sender=bob)
    sc.verify(balance(token, bob) == 110)

    # not the owner or operator
    token.transfer([sp.record(from_=alice.address,
        txs=[sp.record(to_=bob.address, token_id=0, amount=1)])],
        _sender=bob, _valid=False, _exception=ErrorMessages.fa2_not_operator())

    # insufficient balance
    token.transfer([sp.record(from_=bob.address,
        txs=[sp.record(to_=alice.address, token_id=0, amount=111)])],
        _sender=bob, _valid=False, _exception=ErrorMessages.fa2_insufficient_balance())

    # tokens that were never issued have no balance
    token.transfer([sp.record(from_=alice.address,
        txs=[sp.record(to_=bob.address, token_id=1, amount=1)])],
        _sender=alice, _valid=False, _exception=ErrorMessages.fa2_insufficient_balance())

    # a failing tx reverts the whole batch
    token.transfer([sp.record(from_=alice.address, txs=[
        sp.record(to_=bob.address, token_id=0, amount=10),
        sp.record(to_=bob.address, token_id=0, amount=10000)])],
        _sender=alice, _valid=False, _exception=ErrorMessages.fa2_insufficient_balance())
    sc.verify(balance(token, alice) == 870)
    sc.verify(balance(token, bob) == 110)

    #
    # update_operators
    #
    sc.h2("update_operators")

    operator_alice_bob = sp.record(owner=alice.address, operator=bob.address, token_id=0)

    # only the owner can add operators
    token.update_operators([sp.variant("add_operator", operator_alice_bob)],
        _sender=bob, _valid=False, _exception=ErrorMessages.fa2_not_owner())

    token.update_operators([sp.variant("add_operator", operator_alice_bob)], _sender=alice)

    # operator can now transfer on behalf of alice
    token.transfer([sp.record(from_=alice.address,
        txs=[sp.record(to_=carol.address, token_id=0, amount=70)])], _sender=bob)
    sc.verify(balance(token, alice) == 800)
    sc.verify(balance(token, carol) == 90)

    # but not for other owners
    token.transfer([sp.record(from_=carol.address,
        txs=[sp.record(to_=bob.address, token_id=0, amount=1)])],
        _sender=bob, _valid=False, _exception=ErrorMessages.fa2_not_operator())

    # only the owner can remove operators
    token.update_operators([sp.variant("remove_operator", operator_alice_bob)],
        _sender=carol, _valid=False, _exception=ErrorMessages.fa2_not_owner())

    token.update_operators([sp.variant("remove_operator", operator_alice_bob)], _sender=alice)
    # removed operators can't transfer any more
    token.transfer([sp.record(from_=alice.address,
        txs=[sp.record(to_=carol.address, token_id=0, amount=1)])],
        _sender=bob, _valid=False, _exception=ErrorMessages.fa2_not_operator())
