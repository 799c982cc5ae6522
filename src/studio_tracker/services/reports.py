"""Plain-text daily reports shared verbatim with the team."""

from datetime import date, time
from decimal import ROUND_HALF_UP, Decimal

from studio_tracker.domain.sales import PaymentMethod, Sale, SoldSale
from studio_tracker.domain.stats import (
    PhotographerTotals,
    SellerTotals,
    StudioSnapshot,
)
from studio_tracker.services.aggregation import (
    pending_sessions,
    photographer_totals,
    seller_totals,
    status_tally,
    today_sales,
    total_revenue,
)

DEFAULT_STUDIO_NAME = "ALCHYMIST"
CENT = Decimal("0.01")


def format_currency(value: float) -> str:
    """Format a value as Brazilian reais, e.g. ``R$ 1.234,56``."""
    # Half-cent amounts round up, matching the pt-BR locale formatter.
    rounded = Decimal(repr(float(value))).quantize(CENT, rounding=ROUND_HALF_UP)
    sign = "-" if rounded < 0 else ""
    grouped = f"{abs(rounded):,.2f}"
    localized = grouped.replace(",", "_").replace(".", ",").replace("_", ".")
    # Plain space after "R$", not the locale's non-breaking space.
    return f"{sign}R$ {localized}"


def format_day(day: date) -> str:
    return day.strftime("%d/%m/%Y")


def format_clock(moment: time) -> str:
    return moment.strftime("%H:%M")


def payment_totals(sales: list[Sale]) -> dict[PaymentMethod, float]:
    """Sum split payments per method across sold sales."""
    totals = {method: 0.0 for method in PaymentMethod}
    for sale in sales:
        if not isinstance(sale, SoldSale):
            continue
        for payment in sale.payments:
            totals[payment.method] += payment.value
    return totals


def partial_report(
    snapshot: StudioSnapshot,
    today: date,
    updated_at: time,
    studio_name: str = DEFAULT_STUDIO_NAME,
) -> str:
    """Render the in-progress ranking report."""
    sales_today = today_sales(snapshot.sales, today)
    tally = status_tally(snapshot, today)
    photographer_lines = _photographer_lines(photographer_totals(snapshot, today))
    seller_lines = "\n".join(
        f"{totals.name}: {format_currency(totals.revenue)}"
        for totals in seller_totals(snapshot, today)
    )

    return (
        f"*Ranking {studio_name} {format_day(today)}\n"
        f"atualizado: {format_clock(updated_at)}*\n"
        " \n"
        "**Fotógrafos**\n"
        " \n"
        f"{photographer_lines}\n"
        "\n"
        "**Vendedores**\n"
        "\n"
        f"{seller_lines}\n"
        "\n"
        f"Pastas a mostrar: {len(pending_sessions(snapshot, today))}\n"
        "\n"
        f"VD: {tally.vd_count}\n"
        f"NV: {tally.nv_count}\n"
        f"D: {tally.d_count}\n"
        "\n"
        f"Total de pastas: {tally.total_sessions}\n"
        f"Total vendido: {format_currency(total_revenue(sales_today))}"
    )


def final_report(
    snapshot: StudioSnapshot,
    today: date,
    studio_name: str = DEFAULT_STUDIO_NAME,
) -> str:
    """Render the end-of-day revenue report."""
    sales_today = today_sales(snapshot.sales, today)
    tally = status_tally(snapshot, today)
    by_method = payment_totals(sales_today)
    revenue = sum(by_method.values())
    average = revenue / tally.vd_count if tally.vd_count else 0.0
    photographer_lines = _photographer_lines(photographer_totals(snapshot, today))
    seller_lines = _seller_lines(seller_totals(snapshot, today))

    return (
        f"*Faturamento {studio_name} {format_day(today)}*\n"
        "\n"
        f"*{format_currency(revenue)}*\n"
        "\n"
        f"Cartão: {format_currency(by_method[PaymentMethod.CARD])}\n"
        f"Pix: {format_currency(by_method[PaymentMethod.PIX])}\n"
        f"Dinheiro: {format_currency(by_method[PaymentMethod.CASH])}\n"
        "\n"
        "*Fotógrafos*\n"
        "\n"
        f"{photographer_lines}\n"
        "\n"
        "*Vendedor*\n"
        "\n"
        f"{seller_lines}\n"
        "\n"
        f"Nv: {tally.nv_count}\n"
        f"D: {tally.d_count}\n"
        f"VD: {tally.vd_count}\n"
        f"Total de Pastas: {tally.total_sessions}\n"
        f"Média: {format_currency(average)}"
    )


def _photographer_lines(totals: list[PhotographerTotals]) -> str:
    return "\n".join(
        f"{item.name}: {format_currency(item.revenue)} / {item.folders} pastas"
        for item in totals
    )


def _seller_lines(totals: list[SellerTotals]) -> str:
    return "\n".join(
        f"{item.name}: {format_currency(item.revenue)} / {item.count} pastas"
        for item in totals
    )
