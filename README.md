# tidbits

A collection of small, self-contained programs for learning: classic ciphers,
the standard collection types put to work on fruit salads, a few graph
algorithms, a concurrency classic and some data handling. Each program is a
plain module you can import, and each also comes with a command.

Only the Python standard library is needed at run time.

## Installing

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | What it does |
| --- | --- |
| `tidbits.caesar` | Caesar cipher `encrypt` / `decrypt` over ASCII letters, a `demo()` and a command |
| `tidbits.decoder` | Letter statistics (`stats_analysis`, `LetterStat`) and brute-force shift guessing (`guess_shift`, `ShiftGuess`) |
| `tidbits.homophonic` | A homophonic substitution cipher with a random mapping (`generate_mapping`, `homophonic_cipher`) |
| `tidbits.dupes` | Finds duplicate phrases by their SHA3-256 digest (`analyze_duplicates`, `DuplicateReport`) |
| `tidbits.salads` | Shuffled fruit salads from lists, deques, CSV text and files |
| `tidbits.picks` | A `Fruit` type that ranks figs highest, sorted fruit sets, distinct counts and random picks |
| `tidbits.languages` | Weights programming languages from 1 (newest) to 100 (oldest) by age |
| `tidbits.counting` | Frequency counting, a fixed sum and an overview of Python collection types |
| `tidbits.community` | Strongly connected components (Kosaraju) over a retweet chain |
| `tidbits.network` | Closeness centrality, Dijkstra shortest distance and `PageRank` |
| `tidbits.philosophers` | Dining philosophers with threads and ordered fork locking |
| `tidbits.asciiplot` | Plots a series of numbers as an ASCII line chart |
| `tidbits.csvtools` | Reads CSV records from a stream and prints a CSV file as a typed table |
| `tidbits.wikicrawl` | Fetches encyclopedia pages concurrently and summarises them |

## Using it as a library

```python
from tidbits.caesar import encrypt, decrypt

secret = encrypt("the quick brown fox", 3)
assert decrypt(secret, 3) == "the quick brown fox"
```

`encrypt` accepts shifts from 0 to 255 and `decrypt` shifts from 0 to 26;
anything else raises `ValueError`.

```python
from tidbits.decoder import guess_shift

guess = guess_shift("Ypp dy dro lexuob. Ofobi zobcyx pyb drowcovfoc", 26)
print(guess.shift, guess.decrypted)
```

`guess_shift` prints the score of every shift it tries and returns a
`ShiftGuess` holding the depth, the best shift, the decrypted text and its score.

```python
from tidbits.network import PageRank, shortest_distance

ranks = PageRank(0.85, 100).rank([[1, 2], [0], [0, 3], [0], [0, 1]])
distance = shortest_distance([("a", "b", 1), ("b", "c", 2)], "a", "c")  # 3
```

```python
from tidbits.csvtools import read_table, format_table

header, rows = read_table("data.csv")
print(format_table(header, rows))
```

Functions that draw random values take an `rng` argument, so you can pass a
seeded `random.Random` to get repeatable results.

## Commands

Every program has a command; run any of them with `--help` to see its options.

Ciphers:

```
tidbits-caesar --message "attack at dawn" --encrypt --shift 10
tidbits-decoder --message "Ypp dy dro lexuob" --guess --stats
tidbits-homophonic
tidbits-dupes
```

Fruit salads and collections:

```
tidbits-vector-salad
tidbits-framed-salad
tidbits-cli-salad --number 4
tidbits-custom-salad --fruits "apple, pear"
tidbits-custom-salad fruits.csv
tidbits-lowmem-salad --path fruits.csv --count 3
tidbits-fig-heap
tidbits-fruit-sets
tidbits-unique-fruits
tidbits-fruits --count 5
```

`tidbits-lowmem-salad` keeps reading its file and printing salads until
stopped when no `--count` is given.

Counting and languages:

```
tidbits-languages
tidbits-count
tidbits-add
tidbits-collections
```

Graphs:

```
tidbits-community
tidbits-centrality
tidbits-shortest-path
tidbits-pagerank
tidbits-plot
```

Concurrency:

```
tidbits-philosophers --seconds 0.5
```

Data:

```
tidbits-csv-records < data.csv
tidbits-csv-table data.csv
```

`tidbits-csv-table` reads `data/iris.csv` when no path is given.

Web (needs network access):

```
tidbits-wikicrawl --workers 4
```

## Limits

- `tidbits.csvtools` is not a data-frame library: it reads a whole file,
  types each column as integer, float or text, and prints it; it does no
  filtering, grouping or other queries.
- The ciphers are for teaching only and offer no real security.
- `tidbits-wikicrawl` fetches a fixed list of pages and needs a working
  internet connection.