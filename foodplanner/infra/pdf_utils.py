import io
from xml.sax.saxutils import escape
from reportlab.lib.pagesizes import A4, landscape
from reportlab.platypus import SimpleDocTemplate, Table, TableStyle, Paragraph, Spacer
from reportlab.lib import colors
from reportlab.lib.styles import getSampleStyleSheet
from foodplanner.domain.MealType import MealType
from foodplanner.logic.shopping.list_builder import build_shopping_list


def generate_pdf_for_plan(plan, title: str, servings: int):
    """Generate a PDF: Day / Breakfast / Lunch / Dinner table, then the scaled shopping list."""
    buf = io.BytesIO()
    doc = SimpleDocTemplate(
        buf, pagesize=landscape(A4),
        rightMargin=20, leftMargin=20, topMargin=20, bottomMargin=20
    )

    styles = getSampleStyleSheet()
    elements = [
        Paragraph(escape(title), styles["Title"]),
        Paragraph(f"{servings} servings", styles["Normal"]),
        Spacer(1, 16),
    ]

    data = [["Day"] + [meal.label for meal in MealType]]
    for i, day in enumerate(plan.days):
        row = [day]
        for meal in MealType:
            recipe = plan.meals[meal][i]
            row.append(recipe.name if recipe else "-")
        data.append(row)

    table = Table(data, repeatRows=1)
    table.setStyle(TableStyle([
        ("BACKGROUND", (0,0), (-1,0), colors.HexColor("#4CAF50")),
        ("TEXTCOLOR", (0,0), (-1,0), colors.whitesmoke),
        ("ALIGN", (0,0), (-1,-1), "CENTER"),
        ("FONTNAME", (0,0), (-1,0), "Helvetica-Bold"),
        ("FONTSIZE", (0,0), (-1,0), 12),
        ("BOTTOMPADDING", (0,0), (-1,0), 10),
        ("GRID", (0,0), (-1,-1), 0.5, colors.grey),
    ]))
    elements.append(table)

    items = build_shopping_list(plan, servings)
    if items:
        elements.append(Spacer(1, 16))
        elements.append(Paragraph(f"Ingredients for {servings} servings", styles["Heading2"]))
        for item in items:
            elements.append(Paragraph(escape(item.display()), styles["Normal"]))

    doc.build(elements)
    return buf.getvalue()
