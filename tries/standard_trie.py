"""
Standard Trie (character-per-edge) with lazy children and sorted enumeration.

This module provides the prefix tree used across the project.
Key design choices:
- **Memory efficiency:** `TrieNode` uses `__slots__` and *lazy* child dicts (`children=None`
  until the first child is added).
- **Sorted output:** Every enumeration visits child keys in ascending character order
  (`sorted(children)` at visitation time), so words always come out lexicographically sorted.
- **Batch performance:** `batch_insert` exploits the Longest Common Prefix (LCP) between
  *adjacent, sorted* inputs to minimize retraversal.
- **Iterative traversals:** All traversals are iterative (no recursion), so word length is
  not limited by the Python recursion limit.


Classes
-------
TrieNode
    Minimal node holding `children` (dict[str, TrieNode] or None) and `is_terminal`.
Trie
    Public API for insert, prefix checks, sorted prefix listing, and structural stats.


Complexity (typical)
--------------------
- insert / search / contains_prefix: O(L)
- batch insert (sorted): ~O(total new characters created); avoids re-walking shared prefixes
- words_with_prefix: O(L + N log S) where N is nodes under the prefix and S the fanout


Conventions & Notes
-------------------
- **Inputs:** Words and prefixes must be `str`. `None` or any other type raises
  `TypeError`; nothing is coerced.
- **Children:** `children` is `None` for leaves; create the dict only when adding
  the first child. Always guard with `if node.children: ...`.
- **Empty string:** `insert("")` is a no-op, so the root is never terminal.
  `contains_prefix("")` is True and `words_with_prefix("")` lists every word.
"""

import logging

log = logging.getLogger(__name__)


def _check_text(value, name):
  if not isinstance(value, str):
    raise TypeError(f"{name} must be a str, got {type(value).__name__}")
  return value


class TrieNode:
  __slots__ = ("children", "is_terminal")

  def __init__(self):
    self.children = None
    self.is_terminal = False

  def sorted_children(self):
    """Return `(char, child)` pairs in ascending character order."""
    children = self.children
    if not children:
      return []
    return [(ch, children[ch]) for ch in sorted(children)]


class Trie:
  __slots__ = ("root", "_size")

  def __init__(self):
    self.root = TrieNode()
    self._size = 0

  def __len__(self):
    return self._size

  def __contains__(self, word):
    return self.search(word) is not None

  def __iter__(self):
    return self.enumerate_prefix("")

  def __repr__(self):
    return f"{type(self).__name__}(words={self._size})"

  def _prepare_batch(self, words, dedup=True, presorted=False):
    """Validate, and optionally sort/deduplicate, a batch of strings.

    Parameters
    ----------
    words : Iterable[str]
        Incoming words to process.
    dedup : bool, default=True
        Remove duplicates within the batch.
    presorted : bool, default=False
        If True, `words` is already sorted. When True + dedup, we do a stable
        O(n) pass to remove adjacent duplicates.

    Returns
    -------
    list[str]
        Words (possibly sorted/deduplicated) ready for batch ops.

    Complexity
    ----------
    O(n log n) when sorting; O(n) when `presorted=True`.
    """
    items = (_check_text(w, "word") for w in words)

    if not presorted:
      return sorted(set(items)) if dedup else sorted(items)

    if dedup:
      unique = []
      last = None
      for w in items:
        if w != last:
          unique.append(w)
          last = w
      return unique
    return list(items)

  def insert(self, word):
    """Insert a single word into the trie.

    Parameters
    ----------
    word : str
        Word to insert. The empty string is accepted and ignored.

    Notes
    -----
    - Lazily creates the `children` dict only when a node gets its first child.
    - Marks the terminal node's `is_terminal=True` at the end of the path.

    Complexity
    ----------
    O(L) time, O(new_nodes) space where L = len(word).
    """
    word = _check_text(word, "word")
    if not word:
      return
    node = self.root

    for w in word:
      children = node.children
      nxt = None if children is None else children.get(w)
      if nxt is None:
        nxt = TrieNode()
        if children is None:
          node.children = {w: nxt}
        else:
          children[w] = nxt
      node = nxt
    if not node.is_terminal:
      node.is_terminal = True
      self._size += 1

  def batch_insert(self, words, *, dedup=True, presorted=False):
    """Bulk-insert many words efficiently using LCP reuse.

    Parameters
    ----------
    words : Iterable[str]
        Words to insert. Empty strings are skipped.
    dedup, presorted
        See `_prepare_batch`.

    Returns
    -------
    int
        Number of words that were not already present.

    Notes
    -----
    Iterates words in sorted order and reuses the Longest Common Prefix (LCP)
    with the previous word to avoid retraversing from the root. With
    `presorted=True` and unsorted input the result is still correct, only the
    LCP reuse is smaller.
    """
    words = self._prepare_batch(words, dedup, presorted)

    prev = ''
    path = [self.root]
    added = 0

    for w in words:
      if not w:
        continue
      lp, lw = len(prev), len(w)
      i = 0
      while i < lp and i < lw and prev[i] == w[i]:
        i += 1

      del path[i + 1:]
      node = path[-1]

      for char in w[i:]:
        children = node.children
        nxt = None if children is None else children.get(char)

        if nxt is None:
          nxt = TrieNode()
          if children is None:
            node.children = {char: nxt}
          else:
            children[char] = nxt

        path.append(nxt)
        node = nxt

      if not node.is_terminal:
        node.is_terminal = True
        added += 1
      prev = w

    self._size += added
    log.debug("batch_insert: %d prepared, %d new, %d total", len(words), added, self._size)
    return added

  def prefix_search(self, prefix):
    """Return the node at the end of `prefix`, or None if the path is missing.

    The empty prefix returns the root.

    Complexity
    ----------
    O(L) where L = len(prefix).
    """
    prefix = _check_text(prefix, "prefix")
    node = self.root
    for w in prefix:
      node = None if node.children is None else node.children.get(w)
      if node is None:
        return None
    return node

  def search(self, word):
    """Return the terminal node for `word` if present, else None.
    """
    node = self.prefix_search(word)
    return node if node is not None and node.is_terminal else None

  def contains_prefix(self, prefix):
    """True if the full character path of `prefix` exists in the trie."""
    return self.prefix_search(prefix) is not None

  def enumerate_prefix(self, prefix, k=None):
    """Yield words that start with `prefix` in lexicographic order.

    Parameters
    ----------
    prefix : str
        The prefix to enumerate from. Use "" to export the entire trie.
    k : int | None, default=None
        If None, yield all matches; otherwise, yield up to `k` matches.

    Yields
    ------
    str
        Words found under the prefix, `prefix` itself first when it is a word.

    Implementation details
    ----------------------
    - Uses a shared mutable character buffer to minimize intermediate string
      allocations; only joins to a Python string at yield time.
    - Each stack frame holds an iterator over the node's sorted children, so
      siblings are visited in ascending character order.
    """
    if k is not None and k < 0:
      raise ValueError(f"k must be None or >= 0, got {k}")
    node = self.prefix_search(prefix)
    if node is None or k == 0:
      return

    yielded = 0
    buf = list(prefix)

    if node.is_terminal:
      yield prefix
      if k is not None:
        yielded += 1
        if yielded >= k:
          return

    stack = [(iter(node.sorted_children()), len(buf))]

    while stack:
      it, depth = stack[-1]
      try:
        ch, child = next(it)
        del buf[depth:]
        buf.append(ch)
        if child.is_terminal:
          yield "".join(buf)
          if k is not None:
            yielded += 1
            if yielded >= k:
              return
        if child.children:
          stack.append((iter(child.sorted_children()), len(buf)))
      except StopIteration:
        stack.pop()

  def words_with_prefix(self, prefix):
    """Return the sorted list of words starting with `prefix` ([] if none)."""
    return list(self.enumerate_prefix(prefix))

  def list_all_sorted(self):
    """Return every inserted word once, in lexicographic order."""
    return list(self.enumerate_prefix(""))

  def count_nodes(self, get_avg_branch_factor=False):
    """Return total node count, or average branching factor over internal nodes.

    Parameters
    ----------
    get_avg_branch_factor : bool, default=False
        If False, return the total node count (root included).
        If True, return average out-degree over internal nodes only:
        `sum(len(children)) / (# internal nodes)`.

    Returns
    -------
    int | float
        Total nodes (int) or average branching factor (float).

    Complexity
    ----------
    O(#nodes) time, O(depth) extra space.
    """
    total_nodes = 0
    internal = 0
    total_deg = 0

    stack = [self.root]
    while stack:
      node = stack.pop()
      total_nodes += 1
      children = node.children
      if children:
        total_deg += len(children)
        internal += 1
        stack.extend(children.values())
    if get_avg_branch_factor:
      return (total_deg / internal) if internal else 0.0
    return total_nodes
