"""Render query results as plain text."""

from property_finder.models import Property, QueryResult, format_price
from property_finder.models.property import format_quantity

DEFAULT_DISPLAY_LIMIT = 5
DEFAULT_DIVIDER_WIDTH = 50


def format_property(prop: Property) -> str:
    """Render every attribute of a listing, one per line."""
    amenities = ", ".join(prop.amenities) if prop.amenities else "None listed"
    return "\n".join(
        [
            prop.title,
            f"Address: {prop.address}",
            f"Price: {format_price(prop.price)}",
            f"Bedrooms: {prop.bedrooms}, Bathrooms: {format_quantity(prop.bathrooms)}",
            f"Size: {prop.sqft} square feet",
            f"Built: {prop.year_built}",
            f"Description: {prop.description}",
            f"Amenities: {amenities}",
            f"Pet Friendly: {'Yes' if prop.pet_friendly else 'No'}",
            f"Available: {'Yes' if prop.available else 'No'}",
        ]
    )


def format_results(
    result: QueryResult,
    display_limit: int = DEFAULT_DISPLAY_LIMIT,
    divider_width: int = DEFAULT_DIVIDER_WIDTH,
) -> str:
    """Render a query result as a report.

    Parameters
    ----------
    result : QueryResult
        Matches to render.
    display_limit : int
        Maximum number of listings shown in full.
    divider_width : int
        Width of the dashed line after each listing.

    Returns
    -------
    str
        A header with the total match count, up to ``display_limit``
        listing blocks, and a trailer counting the listings left out.
    """
    if not result.properties:
        return (
            f"{result.title}: No properties found matching your criteria. "
            "Try adjusting your search terms."
        )

    divider = "-" * divider_width
    lines = [f"{result.title} ({result.total_count} found):", ""]
    for prop in result.properties[:display_limit]:
        lines.append(format_property(prop))
        lines.append(divider)

    hidden = result.total_count - display_limit
    if hidden > 0:
        lines.append("")
        lines.append(
            f"... and {hidden} more properties. "
            "Please refine your search for more specific results."
        )

    return "\n".join(lines)
