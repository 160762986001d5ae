"""Tests for request payload validation."""

from __future__ import annotations

from budgetkeeper.blueprints.account.forms import AccountForm
from budgetkeeper.blueprints.expenses.forms import ExpenseForm, PaymentStatusForm
from budgetkeeper.blueprints.forms import format_errors
from budgetkeeper.blueprints.payments.forms import PaymentForm
from budgetkeeper.blueprints.reimbursements.forms import ReimbursementForm
from budgetkeeper.blueprints.savings.forms import SavingForm
from budgetkeeper.services.money import MoneyFormat


def test_account_form_accepts_negative_balance():
    form = AccountForm.from_mapping({"balance": -120.5})

    assert form.validate()
    assert form.balance == -120.5


def test_account_form_requires_balance():
    form = AccountForm.from_mapping({})

    assert not form.validate()
    assert form.errors == {"balance": ["Balance is required"]}


def test_amount_text_goes_through_currency_parser():
    form = SavingForm.from_mapping({"name": "  Holidays  ", "amount": "1 234,50 €"})

    assert form.validate()
    assert form.name == "Holidays"
    assert form.amount == 1234.5


def test_amount_text_uses_configured_format():
    us = MoneyFormat.for_locale("en-US", "USD")
    form = SavingForm.from_mapping({"name": "Car", "amount": "$1,234.50"}, money_format=us)

    assert form.validate()
    assert form.amount == 1234.5


def test_amount_rejects_garbage_booleans_and_extra_decimals():
    for value, message in (
        ("abc", "Amount must be a valid number"),
        (True, "Amount must be a number"),
        (None, "Amount must be a number"),
        (10.555, "Amount must have at most 2 decimal places"),
    ):
        form = SavingForm.from_mapping({"name": "Car", "amount": value})
        assert not form.validate()
        assert form.errors["amount"] == [message]


def test_name_length_and_blank():
    assert not SavingForm.from_mapping({"name": "   ", "amount": 1}).validate()
    form = SavingForm.from_mapping({"name": "x" * 101, "amount": 1})
    assert not form.validate()
    assert form.errors["name"] == ["Name must be at most 100 characters"]


def test_partial_form_only_checks_present_fields():
    form = SavingForm.from_mapping({"amount": 20}, partial=True)

    assert form.validate()
    assert form.name is None
    assert form.amount == 20


def test_expense_amount_must_not_be_negative():
    form = ExpenseForm.from_mapping({"description": "Rent", "amount": -1})

    assert not form.validate()
    assert form.errors["amount"] == ["Amount must be positive or zero"]
    assert ExpenseForm.from_mapping({"description": "Free trial", "amount": 0}).validate()


def test_payment_and_reimbursement_amounts_must_be_positive():
    for form_cls in (PaymentForm, ReimbursementForm):
        form = form_cls.from_mapping({"description": "Thing", "amount": 0})
        assert not form.validate()
        assert form.errors["amount"] == ["Amount must be greater than zero"]


def test_payment_update_validates_paid_flag():
    form = PaymentForm.from_mapping({"isPaid": "yes"}, partial=True)

    assert not form.validate()
    assert form.errors == {"isPaid": ["isPaid must be a boolean"]}

    ok = PaymentForm.from_mapping({"isPaid": True}, partial=True)
    assert ok.validate()
    assert ok.is_paid is True and ok.amount is None


def test_payment_status_form():
    assert PaymentStatusForm.from_mapping({"isPaid": False}).validate()
    form = PaymentStatusForm.from_mapping({"isPaid": 1})
    assert not form.validate()


def test_non_object_body_is_rejected():
    form = ExpenseForm.from_mapping(["not", "an", "object"])

    assert not form.validate()
    assert form.errors == {"body": ["Request body must be a JSON object."]}


def test_format_errors_flattens_fields():
    form = ExpenseForm.from_mapping({"amount": "abc"})
    form.validate()

    assert format_errors(form.errors) == (
        "description: Description is required, amount: Amount must be a valid number"
    )


def test_amount_text_with_more_than_two_decimals_is_rejected():
    form = AccountForm.from_mapping({"balance": "10.999 €"})

    assert not form.validate()
    assert form.errors == {"balance": ["Balance must have at most 2 decimal places"]}

    dotted = SavingForm.from_mapping({"name": "Car", "amount": "$10.999"})
    assert not dotted.validate()
    assert dotted.errors["amount"] == ["Amount must have at most 2 decimal places"]


def test_amount_text_is_stored_in_cents():
    form = AccountForm.from_mapping({"balance": "-0,10 €"})

    assert form.validate()
    assert form.balance == -0.1


def test_integer_too_large_for_a_float_is_a_validation_error():
    form = AccountForm.from_mapping({"balance": 10**400})

    assert not form.validate()
    assert form.errors == {"balance": ["Balance must be a valid number"]}
