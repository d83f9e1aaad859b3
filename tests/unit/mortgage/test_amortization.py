# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for the amortization engine.

Checks the schedule against independent installment formulas and the
conservation properties every schedule must satisfy.
"""

import pytest

from amortiza.core.primitives import (
    ConfigurationError,
    EuriborPathError,
    NoInterestPeriodsError,
)
from amortiza.mortgage import (
    ExtraItem,
    FixedInterestPeriod,
    MortgageConfig,
    VariableInterestPeriod,
    annuity_payment,
    calculate_amortization,
    months_to_amortize,
)
from tests.conftest import fixed_config, manual_monthly_payment


def two_period_config(second_rate: float) -> MortgageConfig:
    return MortgageConfig(
        principal=100_000,
        months=12,
        periods=[
            FixedInterestPeriod(start_month=1, end_month=6, annual_interest_rate=3.0),
            FixedInterestPeriod(start_month=7, end_month=12, annual_interest_rate=second_rate),
        ],
    )


class TestInstallmentHelpers:
    """Test the annuity helpers against the closed-form formula."""

    def test_annuity_payment_matches_formula(self):
        expected = manual_monthly_payment(208_000, 3.5, 360)
        assert annuity_payment(208_000, 0.035 / 12, 360) == pytest.approx(expected, rel=1e-9)

    def test_annuity_payment_zero_rate(self):
        assert annuity_payment(12_000, 0.0, 12) == pytest.approx(1_000)

    def test_months_to_amortize_zero_rate(self):
        assert months_to_amortize(10_000, 0.0, 1_000) == 10
        assert months_to_amortize(10_001, 0.0, 1_000) == 11

    def test_months_to_amortize_round_trip(self):
        """An installment computed for n months needs exactly n months."""
        rate = 0.04 / 12
        payment = annuity_payment(50_000, rate, 48)
        assert months_to_amortize(50_000, rate, payment) == 48

    def test_months_to_amortize_rounds_up(self):
        rate = 0.04 / 12
        payment = annuity_payment(50_000, rate, 48)
        assert months_to_amortize(50_500, rate, payment) == 49


class TestFixedSchedule:
    """Test a single fixed period without extra payments."""

    def test_twelve_month_schedule(self):
        schedule = calculate_amortization(fixed_config(months=12))

        assert len(schedule) == 12
        expected_payment = manual_monthly_payment(100_000, 3.5, 12)
        for row in schedule:
            assert row.payment == pytest.approx(expected_payment, abs=0.01)
            assert row.period == 1
        assert schedule[0].interest_payment == pytest.approx(100_000 * 0.035 / 12)
        assert schedule[-1].remaining_balance == pytest.approx(0, abs=0.01)

    def test_months_are_consecutive(self, simple_fixed_config):
        schedule = calculate_amortization(simple_fixed_config)
        assert [row.month for row in schedule] == list(range(1, 121))

    def test_interest_principal_split(self, simple_fixed_config):
        schedule = calculate_amortization(simple_fixed_config)
        balance = simple_fixed_config.principal
        for row in schedule[:-1]:
            assert row.interest_payment == pytest.approx(balance * 0.035 / 12)
            assert row.principal_payment + row.interest_payment == pytest.approx(row.payment)
            balance -= row.principal_payment
            assert row.remaining_balance == pytest.approx(balance)

    def test_principal_conservation(self, simple_fixed_config):
        schedule = calculate_amortization(simple_fixed_config)
        total_principal = sum(row.principal_payment for row in schedule)
        assert abs(total_principal - 100_000) < 0.01
        assert schedule[-1].remaining_balance == 0

    def test_balance_is_non_increasing(self):
        schedule = calculate_amortization(two_period_config(4.0))
        balances = [row.remaining_balance for row in schedule]
        assert all(later <= earlier for earlier, later in zip(balances, balances[1:]))

    def test_zero_rate_schedule(self):
        schedule = calculate_amortization(fixed_config(principal=12_000, months=12, rate=0.0))
        assert len(schedule) == 12
        assert all(row.interest_payment == 0 for row in schedule)
        assert all(row.payment == pytest.approx(1_000) for row in schedule)
        assert schedule[-1].remaining_balance == 0


class TestMultiplePeriods:
    """Test installment recomputation across period boundaries."""

    def test_upstream_rows_independent_of_downstream_rate(self):
        lower = calculate_amortization(two_period_config(4.0))
        higher = calculate_amortization(two_period_config(5.0))

        for a, b in zip(lower[:6], higher[:6]):
            assert a.payment == pytest.approx(b.payment, abs=0.01)
            assert a.principal_payment == pytest.approx(b.principal_payment, abs=0.01)
            assert a.interest_payment == pytest.approx(b.interest_payment, abs=0.01)
            assert a.remaining_balance == pytest.approx(b.remaining_balance, abs=0.01)
        assert higher[6].payment > lower[6].payment

    def test_installment_recomputed_at_period_start(self):
        schedule = calculate_amortization(two_period_config(5.0))
        expected = manual_monthly_payment(schedule[5].remaining_balance, 5.0, 6)
        assert schedule[6].payment == pytest.approx(expected)
        assert schedule[6].period == 2

    def test_periods_given_out_of_order(self):
        ordered = two_period_config(4.0)
        shuffled = ordered.model_copy(update={"periods": list(reversed(ordered.periods))})
        assert calculate_amortization(shuffled) == calculate_amortization(ordered)

    def test_last_period_beyond_term_is_clamped(self):
        config = MortgageConfig(
            principal=50_000,
            months=24,
            periods=[FixedInterestPeriod(start_month=1, end_month=36, annual_interest_rate=3.0)],
        )
        schedule = calculate_amortization(config)
        assert len(schedule) == 24
        assert schedule[-1].remaining_balance == 0

    def test_gap_stops_schedule_and_folds_residual(self, caplog):
        config = MortgageConfig(
            principal=10_000,
            months=12,
            periods=[
                FixedInterestPeriod(start_month=1, end_month=6, annual_interest_rate=3.0),
                FixedInterestPeriod(start_month=10, end_month=12, annual_interest_rate=3.0),
            ],
        )
        with caplog.at_level("WARNING", logger="amortiza.mortgage.amortization"):
            schedule = calculate_amortization(config)

        assert len(schedule) == 6
        assert "month 7" in caplog.text
        assert schedule[-1].remaining_balance == 0
        assert sum(row.principal_payment for row in schedule) == pytest.approx(10_000)


class TestVariablePeriods:
    """Test Euribor-linked periods and annual installment revision."""

    def test_rate_is_euribor_plus_differential(self, simple_mixed_config):
        paths = {1: [2.5] * 348}
        schedule = calculate_amortization(simple_mixed_config, paths)

        balance_before = schedule[11].remaining_balance
        assert schedule[12].interest_payment == pytest.approx(
            balance_before * (2.5 + 0.99) / 100 / 12
        )

    def test_installment_revised_annually(self, simple_mixed_config):
        path = [2.0] * 12 + [3.0] * 12 + [3.0] * 324
        schedule = calculate_amortization(simple_mixed_config, {1: path})

        first_year = [row.payment for row in schedule[12:24]]
        assert max(first_year) == pytest.approx(min(first_year))
        assert schedule[24].payment > schedule[23].payment

    def test_installment_fixed_between_revisions(self, simple_mixed_config):
        """Monthly Euribor moves change the interest split, not the installment."""
        path = [2.0 + 0.1 * (i % 12) for i in range(348)]
        schedule = calculate_amortization(simple_mixed_config, {1: path})

        window = schedule[12:24]
        assert len({round(row.payment, 8) for row in window}) == 1
        assert window[0].interest_payment != pytest.approx(window[5].interest_payment)

    def test_variable_schedule_conserves_principal(self, simple_mixed_config):
        path = [1.5 + (i % 37) / 10 for i in range(348)]
        schedule = calculate_amortization(simple_mixed_config, {1: path})

        assert len(schedule) == 360
        assert sum(row.principal_payment for row in schedule) == pytest.approx(208_000, abs=0.01)
        assert schedule[-1].remaining_balance == 0

    def test_negative_euribor(self):
        config = MortgageConfig(
            principal=100_000,
            months=24,
            periods=[
                VariableInterestPeriod(start_month=1, end_month=24, euribor_differential=0.5)
            ],
        )
        schedule = calculate_amortization(config, {0: [-0.3] * 24})
        assert schedule[0].interest_payment == pytest.approx(100_000 * 0.002 / 12)
        assert sum(row.principal_payment for row in schedule) == pytest.approx(100_000, abs=0.01)


class TestInsuranceAndExtraItems:
    """Test monthly-equivalent premiums and charges on each row."""

    def test_rows_carry_period_charges(self):
        config = MortgageConfig(
            principal=100_000,
            months=24,
            periods=[
                FixedInterestPeriod(
                    start_month=1,
                    end_month=12,
                    annual_interest_rate=3.0,
                    life_insurance_amount=120,
                    life_insurance_period="annual",
                    home_insurance_amount=15,
                    home_insurance_period="monthly",
                    extra_items=[
                        ExtraItem(name="Account fee", amount=60, period="annual"),
                        ExtraItem(name="Card", amount=5, period="monthly"),
                    ],
                ),
                FixedInterestPeriod(start_month=13, end_month=24, annual_interest_rate=3.0),
            ],
        )
        schedule = calculate_amortization(config)

        assert schedule[0].monthly_insurance == pytest.approx(25)
        assert schedule[0].monthly_extra_items == pytest.approx(10)
        assert schedule[0].total_payment == pytest.approx(schedule[0].payment + 35)
        assert schedule[12].monthly_insurance == 0
        assert schedule[12].monthly_extra_items == 0

    def test_charges_do_not_affect_installment(self):
        plain = calculate_amortization(fixed_config(months=12))
        insured = calculate_amortization(
            MortgageConfig(
                principal=100_000,
                months=12,
                periods=[
                    FixedInterestPeriod(
                        start_month=1,
                        end_month=12,
                        annual_interest_rate=3.5,
                        life_insurance_amount=300,
                    )
                ],
            )
        )
        assert [r.payment for r in plain] == [r.payment for r in insured]


class TestValidation:
    """Test the hard failures raised before any row is produced."""

    def test_no_periods(self):
        config = MortgageConfig(principal=100_000, months=120, periods=[])
        with pytest.raises(NoInterestPeriodsError, match="At least one interest period"):
            calculate_amortization(config)

    def test_missing_euribor_path(self, simple_mixed_config):
        with pytest.raises(EuriborPathError, match="index 1") as excinfo:
            calculate_amortization(simple_mixed_config)
        assert excinfo.value.period_index == 1
        assert excinfo.value.expected_length == 348
        assert excinfo.value.actual_length is None

    def test_wrong_length_euribor_path(self, simple_mixed_config):
        with pytest.raises(EuriborPathError) as excinfo:
            calculate_amortization(simple_mixed_config, {1: [2.0] * 360})
        assert excinfo.value.actual_length == 360
        assert excinfo.value.expected_length == 348

    def test_path_under_wrong_index(self, simple_mixed_config):
        with pytest.raises(EuriborPathError):
            calculate_amortization(simple_mixed_config, {0: [2.0] * 348})

    def test_path_length_clamped_to_term(self):
        config = MortgageConfig(
            principal=100_000,
            months=24,
            periods=[
                VariableInterestPeriod(start_month=1, end_month=36, euribor_differential=1.0)
            ],
        )
        schedule = calculate_amortization(config, {0: [2.0] * 24})
        assert len(schedule) == 24

    def test_errors_are_configuration_errors(self, simple_mixed_config):
        with pytest.raises(ConfigurationError):
            calculate_amortization(simple_mixed_config)
        with pytest.raises(ValueError):
            calculate_amortization(MortgageConfig(principal=1, months=1))


class TestDeterminism:
    """The engine has no hidden randomness."""

    def test_identical_inputs_identical_output(self, simple_mixed_config):
        path = [2.0 + (i % 7) * 0.25 for i in range(348)]
        first = calculate_amortization(simple_mixed_config, {1: path})
        second = calculate_amortization(simple_mixed_config, {1: list(path)})
        assert first == second
        assert [r.model_dump_json() for r in first] == [r.model_dump_json() for r in second]
