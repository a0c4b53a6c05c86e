from .geometry import SectionWidths
from .settings import MAX_SIZE_SECTIONS, Sections


def value_by_percent(value: float, max_value: float, is_percent: bool = True) -> float:
    return value * max_value / 100 if is_percent else value


def current_sections(sections: Sections, viewport_width: float, show_categories: bool) -> Sections:
    """Configured sections adjusted to the categories toggle and the viewport.

    The left section collapses when categories are hidden; the right section
    always takes what the left one leaves.
    """
    left = sections.left if show_categories else 0
    right = MAX_SIZE_SECTIONS - left if sections.is_percent else viewport_width - left
    right = max(right, 0)
    return Sections.model_construct(left=left, right=right, is_percent=sections.is_percent)


def compute_sections(sections: Sections, viewport_width: float, show_categories: bool = True) -> SectionWidths:
    """Pixel widths of the category and chart regions for ``viewport_width``.

    Args:
        sections: Configured section split
        viewport_width: Width available inside the margins
        show_categories: Whether the category-text region is shown

    Returns:
        SectionWidths in pixels

    Examples:
        compute_sections(Sections(left=75), 400)                  # left=75, right=325
        compute_sections(Sections(left=25, is_percent=True), 400)  # left=100, right=300
    """
    current = current_sections(sections, viewport_width, show_categories)
    return SectionWidths(
        left=value_by_percent(current.left, viewport_width, current.is_percent),
        right=value_by_percent(current.right, viewport_width, current.is_percent),
    )
