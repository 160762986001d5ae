"""Flask CLI commands for BudgetKeeper."""

from __future__ import annotations

import click


def init_app(app) -> None:
    """Register CLI commands on the Flask app."""

    @app.cli.command("budgetkeeper-seed")
    @click.option("--demo", is_flag=True, default=False, help="Also insert sample data")
    def budgetkeeper_seed(demo: bool) -> None:
        """Ensure the account row exists, optionally with demo data."""

        from .extensions import get_repositories
        from .services.seed import seed_demo_data

        repositories = get_repositories()
        account = repositories.accounts.get_or_create()
        click.echo(f"Account ready (id={account.id}).")
        if demo:
            created = seed_demo_data(repositories)
            click.echo(f"Demo data inserted: {created} rows.")

    @app.cli.command("budgetkeeper-summary")
    def budgetkeeper_summary() -> None:
        """Print the remaining budget and the subtotals behind it."""

        from .extensions import get_state
        from .services.budgeting import summarize_budget
        from .services.money import format_currency
        from .services.snapshot import load_snapshot

        state = get_state()
        breakdown = summarize_budget(
            load_snapshot(state.repositories, today=state.clock().date())
        )
        fmt = state.money_format
        rows = (
            ("Account balance", breakdown.account_balance),
            ("Virtual savings", breakdown.total_savings),
            ("Unpaid expenses", breakdown.total_unpaid_expenses),
            ("Unpaid payments", breakdown.total_unpaid_payments),
            ("Committed", breakdown.committed),
            ("Reimbursements", breakdown.total_reimbursements),
            ("Remaining budget", breakdown.remaining),
        )
        for label, value in rows:
            click.echo(f"{label:<18} {format_currency(value, fmt):>16}")

    @app.cli.command("budgetkeeper-reset-payments")
    def budgetkeeper_reset_payments() -> None:
        """Mark every recurring expense unpaid for the current month."""

        from .extensions import get_state

        state = get_state()
        now = state.clock()
        count = state.repositories.expenses.reset_month(month=now.month, year=now.year)
        click.echo(f"Reset {count} expense(s) for {now:%Y-%m}.")
