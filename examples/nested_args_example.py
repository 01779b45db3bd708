"""Minimal example decoding bracket-keyed arguments into a msgspec Struct."""

import msgspec

from paramscan import Args, to_tree, unmarshal_args


class Owner(msgspec.Struct):
    name: str = ""
    age: int = 0


class Basket(msgspec.Struct):
    items: list[int] = []
    owner: Owner = msgspec.field(default_factory=Owner)


def main() -> None:
    """Show the merged tree and the decoded value."""
    args = Args.parse("items[]=1&items[]=2&owner[name]=bob&owner[age]=41")
    print("tree:", to_tree(args))
    print("basket:", unmarshal_args(args, Basket))


if __name__ == "__main__":
    main()
