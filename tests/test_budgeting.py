"""Tests for the remaining-budget calculation."""

from __future__ import annotations

import math
import random

from budgetkeeper.services.budgeting import (
    BudgetSnapshot,
    ExpenseAmount,
    PaymentAmount,
    ReimbursementAmount,
    SavingAmount,
    calculate_remaining_budget,
    summarize_budget,
)


def _snapshot(balance, savings=(), expenses=(), payments=(), reimbursements=()):
    """Build a snapshot from bare amounts; expenses/payments as (amount, is_paid)."""

    return BudgetSnapshot.of(
        balance,
        virtual_savings=[SavingAmount(a) for a in savings],
        recurring_expenses=[ExpenseAmount(a, paid) for a, paid in expenses],
        pending_payments=[PaymentAmount(a, paid) for a, paid in payments],
        pending_reimbursements=[ReimbursementAmount(a) for a in reimbursements],
    )


def test_everything_unpaid():
    snapshot = _snapshot(
        5000,
        savings=[1000, 500],
        expenses=[(800, False), (200, False)],
        payments=[(300, False), (150, False)],
    )
    # 5000 - (1500 + 1000 + 450)
    assert calculate_remaining_budget(snapshot) == 2050


def test_paid_payments_are_ignored():
    snapshot = _snapshot(1000, payments=[(200, False), (300, True), (100, False)])
    assert calculate_remaining_budget(snapshot) == 700


def test_paid_expenses_are_ignored():
    snapshot = _snapshot(1000, expenses=[(400, True), (250, False)])
    assert calculate_remaining_budget(snapshot) == 750


def test_overdraft_is_negative():
    snapshot = _snapshot(1000, savings=[500], expenses=[(800, False)], payments=[(200, False)])
    assert calculate_remaining_budget(snapshot) == -500


def test_rounding_removes_float_residue():
    snapshot = _snapshot(
        100.10, savings=[33.33], expenses=[(33.33, False)], payments=[(33.33, False)]
    )
    assert calculate_remaining_budget(snapshot) == 0.11


def test_empty_collections_return_the_balance():
    assert calculate_remaining_budget(_snapshot(3000)) == 3000


def test_empty_zero_snapshot_is_positive_zero():
    result = calculate_remaining_budget(_snapshot(0))
    assert result == 0
    assert math.copysign(1.0, result) == 1.0
    assert math.copysign(1.0, calculate_remaining_budget(_snapshot(-0.0))) == 1.0


def test_zero_balance_with_commitments():
    snapshot = _snapshot(0, savings=[100], expenses=[(50, False)], payments=[(25, False)])
    assert calculate_remaining_budget(snapshot) == -175


def test_reimbursements_are_added():
    snapshot = _snapshot(1000, payments=[(200, False)], reimbursements=[50.25, 24.75])
    assert calculate_remaining_budget(snapshot) == 875


def test_negative_saving_is_a_withdrawal():
    snapshot = _snapshot(1000, savings=[500, -200])
    assert calculate_remaining_budget(snapshot) == 700


def test_decimal_amounts():
    snapshot = _snapshot(
        1500.75, savings=[250.5], expenses=[(100.25, False)], payments=[(50.5, False)]
    )
    assert calculate_remaining_budget(snapshot) == 1099.5


def test_large_numbers_keep_cents():
    snapshot = _snapshot(
        999_999.99,
        savings=[100_000.5, 50_000.25],
        expenses=[(75_000.15, False)],
        payments=[(25_000.09, False)],
    )
    assert calculate_remaining_budget(snapshot) == 749_999


def test_item_order_does_not_change_the_result():
    rng = random.Random(7)
    savings = [round(rng.uniform(-500, 5000), 2) for _ in range(40)]
    expenses = [(round(rng.uniform(0, 2000), 2), rng.random() < 0.5) for _ in range(40)]
    payments = [(round(rng.uniform(0, 900), 2), rng.random() < 0.5) for _ in range(40)]
    reimbursements = [round(rng.uniform(0, 300), 2) for _ in range(40)]

    expected = calculate_remaining_budget(
        _snapshot(123_456.78, savings, expenses, payments, reimbursements)
    )
    for _ in range(5):
        for items in (savings, expenses, payments, reimbursements):
            rng.shuffle(items)
        shuffled = _snapshot(123_456.78, savings, expenses, payments, reimbursements)
        assert calculate_remaining_budget(shuffled) == expected


def test_snapshot_is_left_untouched():
    snapshot = _snapshot(500, savings=[100], expenses=[(50, False)], payments=[(20, True)])
    before = BudgetSnapshot(
        account_balance=snapshot.account_balance,
        virtual_savings=snapshot.virtual_savings,
        recurring_expenses=snapshot.recurring_expenses,
        pending_payments=snapshot.pending_payments,
        pending_reimbursements=snapshot.pending_reimbursements,
    )

    calculate_remaining_budget(snapshot)
    calculate_remaining_budget(snapshot)

    assert snapshot == before


def test_snapshot_materialises_generators():
    snapshot = BudgetSnapshot.of(10, virtual_savings=(SavingAmount(a) for a in (1, 2)))
    assert snapshot.virtual_savings == (SavingAmount(1), SavingAmount(2))
    assert calculate_remaining_budget(snapshot) == calculate_remaining_budget(snapshot) == 7


def test_summarize_budget_reports_subtotals():
    snapshot = _snapshot(
        2000,
        savings=[300, -50],
        expenses=[(400, False), (100, True)],
        payments=[(80.5, False), (20, True)],
        reimbursements=[45.25],
    )

    breakdown = summarize_budget(snapshot)

    assert breakdown.account_balance == 2000
    assert breakdown.total_savings == 250
    assert breakdown.total_unpaid_expenses == 400
    assert breakdown.total_unpaid_payments == 80.5
    assert breakdown.total_reimbursements == 45.25
    assert breakdown.committed == 730.5
    assert breakdown.remaining == calculate_remaining_budget(snapshot) == 1314.75


def test_huge_amounts_do_not_raise():
    assert calculate_remaining_budget(_snapshot(1e27)) == 1e27
    assert calculate_remaining_budget(_snapshot(-1e300, savings=[1e300])) == -2e300
