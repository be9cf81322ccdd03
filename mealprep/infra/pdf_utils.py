import io
from reportlab.lib.pagesizes import A4
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet

from mealprep.domain.ShoppingList import ShoppingList
from mealprep.logic.shopping.list_builder import format_quantity


def generate_pdf_for_shopping_list(shopping_list: ShoppingList, title: str = "Shopping List"):
    """Generate a printable PDF: one table per category with a checkbox, item and quantity column."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=A4,
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [Paragraph(title, styles["Title"]), Spacer(1, 16)]

    groups = shopping_list.grouped()
    if not groups:
        elements.append(Paragraph("Nothing to buy this week.", styles["Normal"]))

    for category, items in groups.items():
        elements.append(Paragraph(category, styles["Heading2"]))
        data = [["", "Item", "Quantity"]]
        for item in items:
            data.append([
                "[x]" if item.checked else "[ ]",
                item.name,
                f"{format_quantity(item.total_quantity)} {item.unit.value}",
            ])
        table = Table(data, repeatRows=1, colWidths=[30, 300, 120])
        table.setStyle(TableStyle([
            ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#059669")),
            ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
            ("ALIGN", (2,0), (2,-1), "RIGHT"),
            ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
            ("BOTTOMPADDING", (0,0), (-1,0), 8),
            ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
        ]))
        elements.append(table)
        elements.append(Spacer(1, 12))

    doc.build(elements)
    return buf.getvalue()
