"""Plain-text receipt layout for an order."""

from __future__ import annotations

from rms.application.dto import OrderDTO

RULE = "=" * 32


def render_receipt(dto: OrderDTO) -> str:
    lines = [f"========== Order #{dto.id} ==========", f"Type: {dto.order_type}"]
    if dto.table_id is not None:
        lines.append(f"Table: {dto.table_id}")
    if dto.delivery_address is not None:
        lines.append(f"Address: {dto.delivery_address}")

    lines.append("")
    lines.append("Items:")
    if not dto.items:
        lines.append("  (no items)")
    for number, item in enumerate(dto.items, start=1):
        lines.append(f"  {number}. {item.name} - {item.price}")
        if item.description:
            lines.append(f"     {item.description}")
        if item.ingredients:
            lines.append(f"     Ingredients: {', '.join(item.ingredients)}")

    lines.append("")
    lines.append(f"Total: {dto.total}")
    lines.append(RULE)
    return "\n".join(lines)
