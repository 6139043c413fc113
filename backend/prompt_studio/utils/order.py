def dense_orders(items, order_field="order"):
    """
    Sorts items by their order and returns (item, position) pairs.

    Items sharing an order value keep their incoming relative order, so a
    transient collision resolves deterministically.
    """
    ranked = sorted(items, key=lambda item: getattr(item, order_field))
    return [(item, index) for index, item in enumerate(ranked)]
