"""Section engine components: validation, tree operations, and reordering."""

# Re-export submodules for direct access if needed
from reorderable_sections.services.section.reordering import SectionReorderer, relocate
from reorderable_sections.services.section.tree_operations import SectionTreeBuilder
from reorderable_sections.services.section.validation import MoveValidator

__all__ = ["MoveValidator", "SectionTreeBuilder", "SectionReorderer", "relocate"]
