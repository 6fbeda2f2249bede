"""Basic usage example for ownedlist."""

from ownedlist import ABSENT, LinkedList, Predicate


class Connection:
    """Stand-in for a value that owns an external resource."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.closed = False

    def close(self) -> None:
        self.closed = True

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"Connection({self.name!r}, {state})"


def main() -> None:
    """Demonstrate remove vs delete ownership."""
    pool = LinkedList[Connection](destructor=Connection.close)

    print("=== Remove vs Delete ===\n")

    for name in ("db", "cache", "queue", "search"):
        pool.add_last(Connection(name))
    print(f"Pool: {pool!r}")

    # Remove hands the value back; the caller still owns it
    kept = pool.remove_first()
    print(f"Removed (still open): {kept!r}")

    # Delete detaches the value and closes it through the destructor
    last = pool.get_last()
    pool.delete_last()
    print(f"Deleted (now closed): {last!r}")

    # Predicates can carry context
    pool.delete_if(Predicate(lambda conn, prefix: conn.name.startswith(prefix), "ca"))
    print(f"After delete_if: {pool!r}")

    # Out-of-range access is a silent no-op
    print(f"get(10) -> {pool.get(10)!r} (is ABSENT: {pool.get(10) is ABSENT})\n")

    # Traverse with a cursor, removing as we go
    pool.add_array([Connection("a"), Connection("b")])
    cursor = pool.iterator()
    while cursor.has_next():
        conn = cursor.next()
        if conn.name == "a":
            cursor.remove_current()
    print(f"After cursor removal: {pool!r}")

    # Dispose of every value and the list itself
    pool.destroy()
    print(f"Destroyed: {pool!r}")


if __name__ == "__main__":
    main()
