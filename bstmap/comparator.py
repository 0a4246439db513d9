import dns.name

def _sign(n):
    if n < 0:
        return -1
    if n > 0:
        return 1
    return 0

def natural_order(a, b):
    """Compares a and b using their own < and == operators."""
    if a < b:
        return -1
    if a == b:
        return 0
    return 1

def reverse_order(comparator):
    def compare(a, b):
        return -comparator(a, b)
    return compare

def key_order(func, comparator=natural_order):
    """Returns a comparator which compares func(a) with func(b)."""
    def compare(a, b):
        return comparator(func(a), func(b))
    return compare

def _to_dname(n):
    if isinstance(n, dns.name.Name):
        return n
    return dns.name.from_text(n)

def dname_order(a, b):
    """Canonical DNS name order, see RFC4034, section 6.1

    a, b:    dns.name.Name objects or domain names in text form

    """
    order = _to_dname(a).fullcompare(_to_dname(b))[1]
    return _sign(order)
