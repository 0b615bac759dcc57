"""Basic usage example for reorderable section lists."""

from reorderable_sections import ReorderableSectionedList, ReorderEngine, Section


def main():
    """Demonstrate flattening, moving, and reading back sections."""
    engine = ReorderEngine([
        Section("Active", ["A", "B", "C"]),
        Section("Inactive", ["D", "E", "F"]),
    ])

    print("Flat items:")
    for item in engine.items:
        print(f"  {item!r}")

    # React to changes the way a UI layer would
    engine.subscribe(lambda e: print(f"Changed: {[s.to_tuple() for s in e.sections]}"))

    # Move C (rest index 2) to just after the "Inactive" header
    engine.move({2}, 3)

    # Same kind of gesture via the view, in full row coordinates: drag D (row 5) to row 1
    view = ReorderableSectionedList(
        engine,
        header_builder=lambda header: f"== {header} ==",
        element_builder=lambda element: f"   {element}",
    )
    view.drop({5}, 1)

    print("Rendered rows:")
    for row, text in zip(view.rows(), view.render()):
        marker = " " if row.move_disabled else "≡"
        print(f"{marker} {text}")


if __name__ == "__main__":
    main()
