# knrtools

A small collection of classic text and number utilities, with a handful of
command-line filters built on them. It has no dependencies beyond the
standard library.

## What is inside

| Module | What it does |
| --- | --- |
| `knrtools.textops` | String helpers: `strcat`, `strend`, `strncpy`, `strncat`, `strcmp`, `strncmp`, `reverse`, `squeeze`, `strrindex`, `to_lower`, `to_upper`, `lookup` |
| `knrtools.numparse` | Number parsing and formatting: `atof` (with exponents), `atoi`, `itoa`, `htoi`, `printd`, `read_ints`, `read_floats` |
| `knrtools.searching` | `binsearch` over an ascending sequence of numbers or strings |
| `knrtools.sorting` | `quicksort` with a random pivot, `midpoint_sort`, `read_lines` and `TooManyLinesError` |
| `knrtools.dates` | `is_leap`, `day_of_year`, `month_day`, `month_name` |
| `knrtools.rpn` | A reverse Polish calculator: `Stack`, `StackError`, `Token`, `tokenize`, `Calculator`, `evaluate_args` |
| `knrtools.symtab` | A chained hash table of names and definitions: `hash_name`, `SymbolTable`, `Entry` |
| `knrtools.wordtree` | Word counting with a binary search tree: `WordTree`, `count_words` |
| `knrtools.arena` | A fixed-size bump allocator handing out offsets: `Arena` |
| `knrtools.finder` | Line filters: `find_lines`, `UsageError` |
| `knrtools.filecompare` | `first_difference` between two sequences of lines, returned as a `Difference` |
| `knrtools.keywords` | `count_keywords` for C keywords, one word per line |
| `knrtools.histograms` | `letter_histogram`, `word_length_histogram`, `render_letter_histogram`, `render_word_length_histogram`, and `draw_tree` |
| `knrtools.miniformat` | `minprintf`, a tiny printf supporting `%d`, `%ld`, `%ud`, `%f` and `%s`, and `echo` |

## Installing

```
pip install .
```

Running the tests:

```
pip install ".[test]"
pytest
```

## Using the library

```python
from knrtools.numparse import atof, itoa, htoi
from knrtools.searching import binsearch
from knrtools.dates import day_of_year, month_day, month_name
from knrtools.symtab import SymbolTable

atof("\t   -987.654")          # -987.654
atof("123.45e-6")              # 0.00012345
itoa(-12345)                   # "-12345"
htoi("0x1F")                   # 31

squares = [i * i for i in range(100)]
binsearch(100, squares)        # 10

day_of_year(2024, 11, 9)       # 314
month_day(2024, 314)           # (11, 9)
month_name(1)                  # "January"

table = SymbolTable()
table.insert("chick", "les")
table.lookup("chick").defn     # "les"
```

`day_of_year` and `month_day` raise `ValueError` for dates outside the year;
`htoi` raises `ValueError` when the text has no `0x` prefix or holds a
non-hexadecimal digit.

A reverse Polish calculator returns the value popped at each newline:

```python
from knrtools.rpn import Calculator, evaluate_args

calc = Calculator()
calc.feed("1 2 + 4 *\n")       # [12.0]
evaluate_args(["2", "3", "4", "+", "*"])   # 14.0
```

Stack underflow and overflow raise `StackError`, division by zero raises
`ZeroDivisionError`, and an unknown operator raises `ValueError`.

## Commands

Installing the package provides these commands:

| Command | Purpose |
| --- | --- |
| `knr-rpn` | Reverse Polish calculator reading expressions from standard input; each newline prints the top of the stack |
| `knr-expr ARGS...` | Evaluate a reverse Polish expression given one token per argument, e.g. `knr-expr 2 3 4 + '*'` |
| `knr-sort` | Read lines from standard input (at most 1000) and print them sorted |
| `knr-wordcount` | Count words read from standard input, one per line, up to the first empty line; prints each word with its count in sorted order |
| `knr-keywords` | Read C keywords from standard input, one per line; after each line prints the running counts |
| `knr-grep PATTERN` | Print the lines of standard input that contain `PATTERN` |
| `knr-find [-x] [-n] PATTERN` | Like `knr-grep`; `-x` prints lines that do not match, `-n` adds line numbers; the exit status is the number of lines printed |
| `knr-compare FILE1 FILE2` | Print the first pair of lines where two files differ |
| `knr-echo ARGS...` | Print the arguments separated by single spaces |
| `knr-strlen len STRING` | Print the length of `STRING` |
| `knr-hex NUMBER` | Convert a hexadecimal string such as `0x1F` to decimal |

Examples:

```
printf 'pear\napple\nfig\n' | knr-sort
printf 'one hi\ntwo\nthree hi\n' | knr-find -n hi
knr-compare old.txt new.txt
knr-hex 0x1F
```

## What it does not do

The histogram functions and `draw_tree` only return text; there is no
command for them. The `Arena` allocator tracks offsets into a pool of a
given size and holds no data itself.