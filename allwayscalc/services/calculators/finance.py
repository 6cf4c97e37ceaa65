from __future__ import annotations

from dataclasses import dataclass

from ...utils.number_format import round_value


@dataclass(frozen=True)
class TipResult:
    tip_amount: float
    total_bill: float
    per_person: float


@dataclass(frozen=True)
class SimpleInterestResult:
    principal: float
    total_interest: float
    total_value: float


@dataclass(frozen=True)
class DiscountResult:
    saved_amount: float
    final_price: float


@dataclass(frozen=True)
class LoanResult:
    monthly_payment: float
    total_payment: float
    total_interest: float
    loan_amount: float


@dataclass(frozen=True)
class CompoundInterestResult:
    principal: float
    future_value: float
    total_interest: float


@dataclass(frozen=True)
class SipResult:
    total_investment: float
    future_value: float
    total_interest: float


@dataclass(frozen=True)
class GstResult:
    base_amount: float
    gst_amount: float
    total_amount: float

    @property
    def cgst(self) -> float:
        return self.gst_amount / 2

    @property
    def sgst(self) -> float:
        return self.gst_amount / 2


GST_ADD = "add"
GST_REMOVE = "remove"
GST_PRESET_RATES = (3, 5, 12, 18, 28)


def calculate_tip(bill: float, tip_percentage: float, people: int) -> TipResult:
    if people < 1:
        raise ValueError("Must be at least one person.")
    tip_amount = bill * (tip_percentage / 100)
    total_bill = bill + tip_amount
    return TipResult(tip_amount=tip_amount, total_bill=total_bill, per_person=total_bill / people)


def calculate_simple_interest(principal: float, rate: float, years: float) -> SimpleInterestResult:
    total_interest = principal * (rate / 100) * years
    return SimpleInterestResult(
        principal=principal,
        total_interest=total_interest,
        total_value=principal + total_interest,
    )


def calculate_discount(original_price: float, discount: float) -> DiscountResult:
    saved_amount = original_price * (discount / 100)
    return DiscountResult(
        saved_amount=round_value(saved_amount, 2),
        final_price=round_value(original_price - saved_amount, 2),
    )


def calculate_loan_emi(loan_amount: float, annual_rate: float, years: int) -> LoanResult:
    """Equated monthly instalment for a loan repaid over ``years`` with monthly compounding."""
    payments = years * 12
    if payments < 1:
        raise ValueError("Loan term must be at least 1 year.")
    monthly_rate = annual_rate / 100 / 12
    if monthly_rate == 0:
        monthly_payment = loan_amount / payments
    else:
        growth = (1 + monthly_rate) ** payments
        monthly_payment = loan_amount * monthly_rate * growth / (growth - 1)
    total_payment = monthly_payment * payments
    return LoanResult(
        monthly_payment=monthly_payment,
        total_payment=total_payment,
        total_interest=total_payment - loan_amount,
        loan_amount=loan_amount,
    )


def calculate_compound_interest(
    principal: float, rate: float, years: int, compounds_per_year: int
) -> CompoundInterestResult:
    if compounds_per_year < 1:
        raise ValueError("Must compound at least annually.")
    future_value = principal * (1 + rate / 100 / compounds_per_year) ** (compounds_per_year * years)
    return CompoundInterestResult(
        principal=principal,
        future_value=future_value,
        total_interest=future_value - principal,
    )


def calculate_sip(monthly_investment: float, rate: float, years: int) -> SipResult:
    """Maturity value of a monthly SIP, each instalment invested at the start of the month."""
    months = years * 12
    monthly_rate = rate / 100 / 12
    total_investment = monthly_investment * months
    if monthly_rate == 0:
        future_value = total_investment
    else:
        future_value = (
            monthly_investment * (((1 + monthly_rate) ** months - 1) / monthly_rate) * (1 + monthly_rate)
        )
    return SipResult(
        total_investment=total_investment,
        future_value=future_value,
        total_interest=future_value - total_investment,
    )


def calculate_gst(amount: float, gst_rate: float, mode: str = GST_ADD) -> GstResult:
    """Add GST to a net amount, or split a GST-inclusive amount into base and tax."""
    if mode == GST_ADD:
        gst_amount = amount * (gst_rate / 100)
        return GstResult(base_amount=amount, gst_amount=gst_amount, total_amount=amount + gst_amount)
    if mode == GST_REMOVE:
        base_amount = amount / (1 + gst_rate / 100)
        return GstResult(base_amount=base_amount, gst_amount=amount - base_amount, total_amount=amount)
    raise ValueError(f"Unknown GST mode: {mode}")
