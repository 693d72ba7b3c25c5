import collections

def group_by(iterable, key):
    result = collections.defaultdict(list)
    for value in iterable:
        result[key(value)].append(value)
    return result

def dfs(root, children):
    """Return the set of nodes reachable from ``root``, including ``root``.

    The traversal uses an explicit stack, so deep chains do not hit the
    recursion limit.
    """
    visited = { root }
    stack = [root]
    while stack:
        node = stack.pop()
        for child in children(node):
            if child not in visited:
                visited.add(child)
                stack.append(child)
    return visited

def least_fixpoint(candidates, predicate):
    """Grow a set until no candidate outside it satisfies ``predicate``.

    ``predicate`` receives a candidate and the current set. The set only
    grows, so the loop stops after at most ``len(candidates)`` passes.
    """
    result = set()
    changed = True
    while changed:
        changed = False
        for x in candidates:
            if x not in result and predicate(x, result):
                result.add(x)
                changed = True
    return result
