"""Minimal example binding a query string to a tagged dataclass."""

from dataclasses import dataclass, field

from paramscan import Args, ScanError, scan_args


@dataclass
class Order:
    symbol: str = field(default="", metadata={"url": "tradingsymbol"})
    quantity: int = field(default=0, metadata={"url": "qty"})
    tags: list[str] = field(default_factory=list, metadata={"url": "tag"})


def main() -> None:
    """Scan a valid and an invalid query into an Order."""
    order = Order()
    fields = scan_args(Args.parse("tradingsymbol=INFY&qty=10&tag=a&tag=b"), order, "url")
    print("matched:", fields)
    print("order:", order)

    try:
        _ = scan_args(Args.parse("qty=ten"), Order(), "url")
    except ScanError as exc:
        print("error:", exc)


if __name__ == "__main__":
    main()
