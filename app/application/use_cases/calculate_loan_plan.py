"""Loan repayment calculator use case."""

from typing import Optional

from app.application.dtos.loan import LoanPlan
from app.application.use_cases.loan_lifecycle import LoanLogger
from app.domain.exceptions import ValidationError
from app.domain.value_objects.duration import Duration
from app.domain.value_objects.interest_rate import InterestRate
from app.domain.value_objects.loan_type import LoanType
from app.domain.value_objects.money import Amount, Money

# Eligibility points for the type of loan requested
TYPE_SCORES = {
    LoanType.MORTGAGE: 20,
    LoanType.AUTO: 15,
    LoanType.RENOVATION: 15,
    LoanType.STUDENT: 10,
    LoanType.BUSINESS: 10,
    LoanType.PERSONAL: 5,
}


class LoanCalculator:
    """Use case for quoting repayment plans and scoring eligibility."""

    def __init__(self, logger: Optional[LoanLogger] = None) -> None:
        self._logger = logger

    def calculate_monthly_payment(
        self, amount: Amount, rate: InterestRate, duration: Duration
    ) -> Money:
        return amount.calculate_monthly_payment(rate, duration)

    def calculate_total_amount(
        self, amount: Amount, rate: InterestRate, duration: Duration
    ) -> Money:
        monthly_payment = self.calculate_monthly_payment(amount, rate, duration)
        return monthly_payment * duration.months

    def calculate_total_interest(
        self, amount: Amount, rate: InterestRate, duration: Duration
    ) -> Money:
        total_amount = self.calculate_total_amount(amount, rate, duration)
        return Money(max(total_amount.value - amount.value, 0.0))

    def quote(self, loan_type: LoanType, amount: float, duration_months: int) -> LoanPlan:
        """
        Quote a repayment plan at the loan type's base rate.

        Args:
            loan_type: Loan product
            amount: Requested principal
            duration_months: Requested duration in months

        Returns:
            Repayment plan rounded to cents

        Raises:
            ValidationError: If amount or duration is out of range for the loan type
        """
        principal = Amount.from_float(amount)
        duration = Duration.from_months(duration_months)
        loan_type.ensure_allows(principal, duration)
        rate = InterestRate.from_decimal(loan_type.base_interest_rate)

        monthly_payment = self.calculate_monthly_payment(principal, rate, duration)
        total_amount = self.calculate_total_amount(principal, rate, duration)
        total_interest = self.calculate_total_interest(principal, rate, duration)

        if self._logger:
            self._logger(
                None,
                "calculator",
                loan_type=loan_type.value,
                amount=principal.value,
                duration_months=duration.months,
                monthly_payment=round(monthly_payment.value, 2),
            )

        return LoanPlan(
            loan_type=loan_type,
            amount=round(principal.value, 2),
            duration_months=duration.months,
            annual_interest_rate=rate.annual_rate,
            monthly_payment=round(monthly_payment.value, 2),
            total_amount=round(total_amount.value, 2),
            total_interest=round(total_interest.value, 2),
        )

    def quote_multiple(
        self,
        loan_type: LoanType,
        amount: float,
        durations: Optional[list[int]] = None,
    ) -> list[LoanPlan]:
        """
        Quote plans for several durations.

        Args:
            loan_type: Loan product
            amount: Requested principal
            durations: Durations in months (default: 12, 24, 36, 48, 60)

        Returns:
            Plans for the durations valid for the loan type, in the given order
        """
        if durations is None:
            durations = [12, 24, 36, 48, 60]

        plans = []
        for months in durations:
            try:
                plans.append(self.quote(loan_type, amount, months))
            except ValidationError:
                # Skip durations the loan type does not allow
                continue

        return plans

    def eligibility_score(
        self,
        loan_type: LoanType,
        amount: Amount,
        duration: Duration,
        user_income: float,
    ) -> int:
        """
        Score how comfortably a user can carry a loan.

        Args:
            loan_type: Loan product
            amount: Requested principal
            duration: Requested duration
            user_income: Declared income

        Returns:
            Score between 0 and 100
        """
        score = 0

        income_ratio = amount.value / max(user_income, 1)
        if income_ratio <= 3:
            score += 40
        elif income_ratio <= 5:
            score += 25
        elif income_ratio <= 8:
            score += 10

        duration_ratio = duration.months / loan_type.max_duration_months
        if duration_ratio <= 0.5:
            score += 30
        elif duration_ratio <= 0.75:
            score += 20
        else:
            score += 10

        score += TYPE_SCORES[loan_type]

        return min(100, max(0, score))
