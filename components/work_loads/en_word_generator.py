import itertools
import logging
import math
import random
import string

log = logging.getLogger(__name__)

DEFAULT_ALPHABET = string.ascii_lowercase

## Every two-letter combination is a prefix bucket.
## Words drawn from the same bucket share their first two letters,
## which is what lets us dial in common-prefix density.
PREFIX_LEN = 2
prefixes = ["".join(p) for p in itertools.product(DEFAULT_ALPHABET, repeat=PREFIX_LEN)]
SUFFIX_MIN, SUFFIX_MAX = 1, 8


def _capacity(alphabet_size, min_len, max_len):
  return sum(alphabet_size ** n for n in range(min_len, max_len + 1))


def _rand_word(rng, alphabet, min_len, max_len):
  n = rng.randint(min_len, max_len)
  return "".join(rng.choice(alphabet) for _ in range(n))


def generate_random_words(num_words, seed=None, unique=False, *,
                          min_len=3, max_len=10, alphabet=DEFAULT_ALPHABET):
  """
  Return n random words built from `alphabet`.
  - unique=False: words may repeat
  - unique=True: every word is distinct (requires n <= number of possible words)
  """
  if not alphabet:
    raise ValueError("alphabet must not be empty")
  if min_len < 1 or max_len < min_len:
    raise ValueError(f"need 1 <= min_len <= max_len, got {min_len}..{max_len}")
  limit = _capacity(len(set(alphabet)), min_len, max_len) if unique else math.inf
  if num_words < 1 or num_words > limit:
    raise ValueError(f"num_words must be between 1 and {limit}")
  rng = random.Random(seed)

  if not unique:
    return [_rand_word(rng, alphabet, min_len, max_len) for _ in range(num_words)]

  seen = set()
  out = []
  while len(out) < num_words:
    w = _rand_word(rng, alphabet, min_len, max_len)
    if w in seen:
      continue
    seen.add(w)
    out.append(w)
  return out


def gen_words_with_prefix_freq(num_words, prefix_freq=0.0, seed=None, unique=False):
  """Generates a list of words with a given prefix frequency.
  A higher prefix_freq means more consecutive words share a two-letter prefix.
  Prefix frequency is applied logarithmically
  prefix_freq: 0 -> 0.999...
  """
  def _p_eff_log(x, max_mean=100) -> float:
    # Logarithmic mapping of prefix frequency to effective prefix frequency
    if x < 0 or x > 1:
      raise ValueError("Prefix frequency must be between 0 and 1")
    x = max(0.0, min(0.999999, x))
    k = math.log(max_mean)
    p = 1.0 - math.exp(-k * x)
    return min(p, 0.999999)
  p_eff = _p_eff_log(prefix_freq)

  if num_words < 1:
    raise ValueError("num_words must be at least 1")
  rng = random.Random(seed)

  def _suffixed(prefix):
    return prefix + _rand_word(rng, DEFAULT_ALPHABET, SUFFIX_MIN, SUFFIX_MAX)

  rand_words_list = []
  seen = set()

  while len(rand_words_list) < num_words:
    prefix = rng.choice(prefixes)
    sample_word = _suffixed(prefix)
    if unique and sample_word in seen:
      continue
    rand_words_list.append(sample_word)
    seen.add(sample_word)

    trigger = rng.random()
    while trigger < p_eff and len(rand_words_list) < num_words:
      new_word = _suffixed(prefix)
      if not (unique and new_word in seen):
        rand_words_list.append(new_word)
        seen.add(new_word)
      trigger = rng.random()

  log.debug("generated %d words (prefix_freq=%.3f, effective=%.3f)",
            len(rand_words_list), prefix_freq, p_eff)
  return rand_words_list
