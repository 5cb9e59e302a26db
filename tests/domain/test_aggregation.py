"""Tests for the aggregation engine."""

from datetime import date
from decimal import Decimal

import pytest

from src.domain.errors import InvalidInputError, InvalidRangeError
from src.domain.models import Category, Transaction
from src.domain.services.aggregation import (
    build_report_payload,
    compute_category_percentages,
    compute_category_statistics,
    compute_class_statistics,
    group_by_category,
    group_by_month,
    running_balance,
    summarize,
    top_categories,
)


SALARY = Category(id=1, name="Salary", type="income")
BONUS = Category(id=2, name="Bonus", type="income")
FOOD = Category(id=3, name="Food", type="expense")
RENT = Category(id=4, name="Rent", type="expense")


def _tx(
    tx_id: int,
    category: Category | None,
    amount: str,
    day: date = date(2024, 1, 15),
) -> Transaction:
    return Transaction(
        id=tx_id,
        user_id=7,
        category=category,
        amount=Decimal(amount),
        date=day,
        comment=None,
    )


def test_summarize_scenario_totals() -> None:
    """Income and expense totals should produce the balance."""
    transactions = [
        _tx(1, SALARY, "100"),
        _tx(2, SALARY, "300"),
        _tx(3, FOOD, "50"),
    ]

    summary = summarize(transactions)

    assert summary.total_income == Decimal("400")
    assert summary.total_expense == Decimal("50")
    assert summary.balance == Decimal("350")


def test_summarize_balance_can_be_negative() -> None:
    """Expenses above income give a negative balance."""
    summary = summarize([_tx(1, SALARY, "10.10"), _tx(2, RENT, "900.25")])

    assert summary.balance == Decimal("-890.15")
    assert summary.total_income - summary.total_expense == summary.balance


def test_summarize_sums_exactly_in_decimal() -> None:
    """Decimal sums should not drift like floats."""
    transactions = [_tx(index, FOOD, "0.10") for index in range(10)]

    assert summarize(transactions).total_expense == Decimal("1.00")


def test_empty_input_yields_zeroes() -> None:
    """An empty period produces zero totals, statistics and no groups."""
    summary = summarize([])
    stats = compute_class_statistics([])

    assert summary.total_income == Decimal("0")
    assert summary.total_expense == Decimal("0")
    assert summary.balance == Decimal("0")
    assert stats.income.mean == Decimal("0")
    assert stats.expense.standard_deviation == Decimal("0")
    assert group_by_category([]) == []
    assert compute_category_statistics([]) == []


def test_group_by_category_uses_category_id() -> None:
    """Categories sharing a name stay separate groups."""
    duplicate_name = Category(id=99, name="Food", type="expense")
    transactions = [
        _tx(1, FOOD, "10.00"),
        _tx(2, SALARY, "1000.00"),
        _tx(3, duplicate_name, "5.00"),
        _tx(4, FOOD, "2.50"),
    ]

    totals = group_by_category(transactions)

    assert [item.category_id for item in totals] == [3, 1, 99]
    assert [item.total for item in totals] == [
        Decimal("12.50"),
        Decimal("1000.00"),
        Decimal("5.00"),
    ]
    assert totals[0].name == "Food"
    assert totals[0].type == "expense"


def test_group_totals_match_summary_per_class() -> None:
    """Category totals of a class add up to the class total."""
    transactions = [
        _tx(1, SALARY, "1200.00"),
        _tx(2, BONUS, "300.50"),
        _tx(3, FOOD, "45.10"),
        _tx(4, RENT, "700.00"),
        _tx(5, FOOD, "12.35"),
    ]

    summary = summarize(transactions)
    totals = group_by_category(transactions)

    income = sum(
        (item.total for item in totals if item.type == "income"),
        Decimal("0"),
    )
    expense = sum(
        (item.total for item in totals if item.type == "expense"),
        Decimal("0"),
    )
    assert income == summary.total_income
    assert expense == summary.total_expense


def test_class_statistics_scenario() -> None:
    """Income and expense statistics are computed independently."""
    transactions = [
        _tx(1, SALARY, "100"),
        _tx(2, SALARY, "300"),
        _tx(3, FOOD, "50"),
    ]

    stats = compute_class_statistics(transactions)

    assert stats.income.median == Decimal("200")
    assert stats.income.mean == Decimal("200")
    assert stats.income.mode == Decimal("100")
    assert stats.expense.mean == Decimal("50")
    assert stats.expense.median == Decimal("50")
    assert stats.expense.mode == Decimal("50")
    assert stats.expense.variance == Decimal("0")
    assert stats.expense.standard_deviation == Decimal("0")


def test_class_statistics_mode_tie_break() -> None:
    """Mode follows the original order of the transactions."""
    transactions = [
        _tx(1, FOOD, "10"),
        _tx(2, RENT, "20"),
        _tx(3, FOOD, "10"),
        _tx(4, RENT, "20"),
    ]

    assert compute_class_statistics(transactions).expense.mode == Decimal(
        "10"
    )


def test_category_statistics_report_median_mode_and_count() -> None:
    """Each category gets its own median, mode and count."""
    transactions = [
        _tx(1, FOOD, "10.00"),
        _tx(2, FOOD, "30.00"),
        _tx(3, SALARY, "500.00"),
        _tx(4, FOOD, "10.00"),
    ]

    stats = compute_category_statistics(transactions)

    assert [item.name for item in stats] == ["Food", "Salary"]
    food = stats[0]
    assert food.median == Decimal("10.00")
    assert food.mode == Decimal("10.00")
    assert food.transaction_count == 3
    assert stats[1].transaction_count == 1


@pytest.mark.parametrize(
    "operation",
    [
        summarize,
        group_by_category,
        compute_class_statistics,
        compute_category_statistics,
        group_by_month,
        running_balance,
    ],
)
def test_missing_category_fails_fast(operation) -> None:
    """A transaction without category is a contract violation."""
    transactions = [_tx(1, FOOD, "10.00"), _tx(2, None, "5.00")]

    with pytest.raises(InvalidInputError):
        operation(transactions)


@pytest.mark.parametrize("amount", ["0", "-5.00", "NaN"])
def test_non_positive_amount_fails_fast(amount: str) -> None:
    """Amounts must be positive finite numbers."""
    with pytest.raises(InvalidInputError):
        summarize([_tx(1, FOOD, amount)])


def test_unknown_category_type_fails_fast() -> None:
    """Only income and expense categories are accepted."""
    transfer = Category(id=5, name="Transfer", type="transfer")

    with pytest.raises(InvalidInputError):
        group_by_category([_tx(1, transfer, "10.00")])


def test_category_percentages_use_class_totals() -> None:
    """Shares are computed against the total of the category's class."""
    transactions = [
        _tx(1, SALARY, "750.00"),
        _tx(2, BONUS, "250.00"),
        _tx(3, FOOD, "40.00"),
    ]
    summary = summarize(transactions)

    shares = compute_category_percentages(
        group_by_category(transactions),
        summary,
    )

    assert [item.percentage for item in shares] == [
        Decimal("75"),
        Decimal("25"),
        Decimal("100"),
    ]


def test_top_categories_sorted_by_total() -> None:
    """Top categories keep only one type, largest first."""
    transactions = [
        _tx(1, FOOD, "40.00"),
        _tx(2, RENT, "700.00"),
        _tx(3, SALARY, "2000.00"),
    ]

    top = top_categories(group_by_category(transactions), "expense", limit=1)

    assert [item.name for item in top] == ["Rent"]


def test_build_report_payload_assembles_all_sections() -> None:
    """The payload carries period, summary, statistics and categories."""
    transactions = [
        _tx(1, SALARY, "100"),
        _tx(2, SALARY, "300"),
        _tx(3, FOOD, "50"),
    ]

    payload = build_report_payload(
        transactions,
        date(2024, 1, 1),
        date(2024, 1, 31),
    )

    assert payload.period.date_from == date(2024, 1, 1)
    assert payload.period.date_to == date(2024, 1, 31)
    assert payload.summary.balance == Decimal("350")
    assert payload.statistics.income.mean == Decimal("200")
    assert [item.name for item in payload.categories] == ["Salary", "Food"]
    assert payload.categories[0].percentage == Decimal("100")
    assert len(payload.category_statistics) == 2
    assert payload.transactions == transactions
    assert [month.month for month in payload.monthly_totals] == ["2024-01"]
    assert payload.running_balance[-1].balance == payload.summary.balance


def test_build_report_payload_rejects_inverted_range() -> None:
    """date_from after date_to is an invalid range."""
    with pytest.raises(InvalidRangeError):
        build_report_payload([], date(2024, 2, 1), date(2024, 1, 1))


def test_group_by_month_buckets_by_calendar_month() -> None:
    """Income and expense are summed per YYYY-MM in chronological order."""
    transactions = [
        _tx(1, FOOD, "40", date(2024, 2, 10)),
        _tx(2, SALARY, "1000", date(2024, 1, 25)),
        _tx(3, FOOD, "60", date(2024, 1, 3)),
        _tx(4, BONUS, "200", date(2024, 2, 28)),
        _tx(5, RENT, "500", date(2024, 2, 1)),
    ]

    months = group_by_month(transactions)

    assert [month.month for month in months] == ["2024-01", "2024-02"]
    assert months[0].income == Decimal("1000")
    assert months[0].expense == Decimal("60")
    assert months[0].balance == Decimal("940")
    assert months[1].income == Decimal("200")
    assert months[1].expense == Decimal("540")
    assert months[1].balance == Decimal("-340")


def test_group_by_month_totals_match_summary() -> None:
    """Month buckets add up to the period totals."""
    transactions = [
        _tx(1, SALARY, "10.10", date(2023, 12, 31)),
        _tx(2, FOOD, "3.30", date(2024, 1, 1)),
        _tx(3, FOOD, "2.20", date(2024, 1, 31)),
    ]

    months = group_by_month(transactions)
    summary = summarize(transactions)

    assert [month.month for month in months] == ["2023-12", "2024-01"]
    assert sum((m.income for m in months), Decimal("0")) == (
        summary.total_income
    )
    assert sum((m.expense for m in months), Decimal("0")) == (
        summary.total_expense
    )


def test_group_by_month_empty_input() -> None:
    """No transactions give no month buckets."""
    assert group_by_month([]) == []


def test_running_balance_sorts_by_date_and_keeps_ties_stable() -> None:
    """Income adds, expense subtracts, same-day rows keep input order."""
    transactions = [
        _tx(1, FOOD, "30", date(2024, 1, 20)),
        _tx(2, SALARY, "100", date(2024, 1, 5)),
        _tx(3, RENT, "50", date(2024, 1, 20)),
        _tx(4, BONUS, "25", date(2024, 1, 20)),
    ]

    points = running_balance(transactions)

    assert [point.transaction_id for point in points] == [2, 1, 3, 4]
    assert [point.change for point in points] == [
        Decimal("100"),
        Decimal("-30"),
        Decimal("-50"),
        Decimal("25"),
    ]
    assert [point.balance for point in points] == [
        Decimal("100"),
        Decimal("70"),
        Decimal("20"),
        Decimal("45"),
    ]
    assert points[1].date == date(2024, 1, 20)
    assert points[-1].balance == summarize(transactions).balance


def test_running_balance_empty_input() -> None:
    """No transactions give no balance points."""
    assert running_balance([]) == []
