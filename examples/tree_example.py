"""Tree example for ownedlist."""

from ownedlist import Tree


def main() -> None:
    """Build a small tree, prune it and map it."""
    tree = Tree.of(
        "root",
        Tree("docs", "readme", "changelog"),
        Tree.of("src", Tree("tmp", "scratch"), Tree("pkg")),
    )
    print(tree, end="\n\n")

    # Removing "tmp" promotes "scratch" into its place
    tree.remove_if(lambda value: value == "tmp")
    print(tree, end="\n\n")

    print(tree.map(str.upper))
    print(f"\nDepth-first: {list(tree)}")


if __name__ == "__main__":
    main()
