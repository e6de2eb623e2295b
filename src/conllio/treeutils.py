"""
Algorithms over dependency trees given as head arrays.

A head array has one entry per token: the 0-based index of the head of
that token, or None if the token is attached to the virtual root. None of
the functions raise on a malformed array, they just answer False.
"""


def get_ancestors(heads, id):
    """
    Yields the ancestors of the node `id`, from its head upwards, stopping
    at a root. The walk also stops at a self-loop, at an out-of-range head
    and after len(heads) steps, so it terminates on cyclic arrays too.

    >>> heads = [2, 2, None, 2, 6, 6, 2, 8, 2, 8, 11, 8]
    >>> list(get_ancestors(heads, 10))
    [11, 8, 2]
    >>> list(get_ancestors(heads, 2))
    []
    >>> list(get_ancestors([1, 0], 0))
    [1, 0]
    """
    size = len(heads)
    node = id
    for _ in range(size):
        if not 0 <= node < size:
            return
        head = heads[node]
        if head is None or head == node or not 0 <= head < size:
            return
        yield head
        node = head


def get_dependents(heads, id):
    """
    Returns the direct dependents of the node `id`.

    >>> get_dependents([2, 2, None, 2, 6, 6, 2], 2)
    [0, 1, 3, 6]
    """
    return [i for i, head in enumerate(heads) if head == id]


def check_heads_boundaries(heads):
    """
    Returns True if all the annotated heads refer to a node of the array.

    >>> check_heads_boundaries([1, None])
    True
    >>> check_heads_boundaries([2, None])
    False
    >>> check_heads_boundaries([-1, None])
    False
    """
    size = len(heads)
    return all(head is None or 0 <= head < size for head in heads)


def contains_cycle(heads):
    """
    Returns True if following the heads upwards from some node revisits a
    node before reaching a root.

    >>> contains_cycle([2, 2, None, 2, 6, 6, 2, 8, 10, 8, 11, 8])
    True
    >>> contains_cycle([1, 2, None])
    False
    >>> contains_cycle([0])
    True
    """
    for id in range(len(heads)):
        if heads[id] == id:
            return True
        seen = {id}
        for ancestor in get_ancestors(heads, id):
            if ancestor in seen:
                return True
            seen.add(ancestor)
    return False


def is_tree(heads):
    """
    Returns True if the heads form a rooted tree (or forest: the number of
    roots is not checked here, see is_single_root).

    Every climb from a start index stamps the visited nodes with that
    index. Meeting a node stamped by the current climb means a cycle,
    meeting one stamped by an earlier climb means the rest of the path is
    already known to reach a root.

    >>> is_tree([2, 2, None, 2, 6, 6, 2, 8, 2, 8, 11, 8])
    True
    >>> is_tree([1, 2, 0])
    False
    >>> is_tree([1, 5])
    False
    >>> is_tree([])
    True
    """
    if not check_heads_boundaries(heads):
        return False
    stamps = [None] * len(heads)
    for i in range(len(heads)):
        k = i
        while True:
            if stamps[k] == i:
                return False
            if stamps[k] is not None:
                break
            if heads[k] is None:
                break
            stamps[k] = i
            k = heads[k]
    return not contains_cycle(heads)


def count_roots(heads):
    """
    >>> count_roots([2, 2, None, 2, 6, 6, 2, 8, None, 8, 11, 8])
    2
    """
    return sum(1 for head in heads if head is None)


def is_single_root(heads):
    """
    >>> is_single_root([1, None])
    True
    >>> is_single_root([None, None])
    False
    """
    return count_roots(heads) == 1


def is_non_projective_arc(heads, id):
    """
    Returns True if the arc from heads[id] to id is non-projective, i.e.
    some node strictly between the two is not dominated by the head.
    Arcs of roots, self-loops and out-of-range indices are never
    non-projective.

    >>> heads = [2, 2, None, 2, 6, 6, 2, 8, 3, 8, 11, 8]
    >>> is_non_projective_arc(heads, 8)
    True
    >>> is_non_projective_arc(heads, 6)
    False
    """
    size = len(heads)
    if not 0 <= id < size:
        return False
    head = heads[id]
    if head is None or head == id or not 0 <= head < size:
        return False
    for k in range(min(head, id) + 1, max(head, id)):
        if head not in get_ancestors(heads, k):
            return True
    return False


def non_projective_arcs(heads):
    """
    Returns the indices of the dependents of all the non-projective arcs.

    >>> non_projective_arcs([2, 2, None, 2, 6, 6, 2, 8, 3, 8, 11, 8])
    [8]
    """
    return [id for id in range(len(heads)) if is_non_projective_arc(heads, id)]


def is_non_projective_tree(heads):
    """
    >>> is_non_projective_tree([2, 2, None, 2, 6, 6, 2, 8, 3, 8, 11, 8])
    True
    >>> is_non_projective_tree([2, 2, None, 2, 6, 6, 2, 8, 2, 8, 11, 8])
    False
    """
    return any(is_non_projective_arc(heads, id) for id in range(len(heads)))
