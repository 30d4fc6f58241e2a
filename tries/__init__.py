from tries.standard_trie import Trie, TrieNode

__all__ = ["Trie", "TrieNode"]
