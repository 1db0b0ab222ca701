# code_racer

code_racer finds the cheapest way to type a whole text with a Rime-style
input-method dictionary. Each pair of consecutive keystrokes has a time cost
("当量"). The tool searches the text for the encoding route with the lowest
total cost and writes a report about it.

The report starts with the route itself. It then gives:

- the character, key and cost totals;
- the code length per character and the cost per character and per key.

With a full keyboard layout the report also gives:

- the load on each hand, row and finger, and the hand bias;
- same-finger jumps across one, two or three rows;
- double, triple, quadruple and longer repeats of one key;
- left-right-left and right-left-right alternation.

## Installation

```
pip install .
```

The package has no runtime dependencies. To run the tests, install the `test`
extra and run pytest:

```
pip install ".[test]"
pytest
```

## Configuration

Three UTF-8 files are read from a configuration directory. By default this is the
`config` directory next to the running program. You can name another one with
`--config-dir`.

- `layout.txt` holds 14 lines of key characters, in this order:
  - the number, top, home, bottom and bottom-most rows;
  - the eight finger columns, from the left little finger to the right little finger;
  - the thumb keys.

  If the file does not have exactly 14 lines, the report holds only the summary figures.
- `punct_dict.txt` holds punctuation entries in the dictionary format
  `word<TAB>code[<TAB>priority]`. A `#` starts a comment.
- `time_map.txt` holds one key pair per line, written as `ab<TAB>1.25`. The program
  reports badly formed and duplicate lines and skips them. A key pair missing from
  this file costs 1.5, and the program records it as unknown.

## Usage

```
code-racer [--config-dir DIR]
```

The program asks for three things on standard input:

1. The connection method:
   - `0`: a space between a letter and a following letter or digit;
   - `1`: no separator;
   - `2`: 键道顶功 rules.
2. The path of the dictionary file, in the same format as `punct_dict.txt`.
3. The path of the text to encode.

Dictionary entries are sorted in this order:

- priority, highest first;
- code length per word length, shortest first;
- word, then code.

When an entry's code is already taken, a selection digit `2`–`9` is added to it,
and `=` turns the page. Each word keeps its cheapest code, or a shorter one.

The report is saved next to the text as `<name>_最小当量编码报告.txt`. If that name
is taken, the program adds `_2`, `_3` and so on. If the file cannot be written, the
report is printed to the console instead. If some key pairs had no known cost, the
program asks whether to save them. Answer with any number to save them to
`<name>_找不到当量的按键组合.txt`.

The program exits with status 1 in these cases:

- a configuration file cannot be read;
- the text cannot be read;
- the input ends early.

## Library use

The building blocks can also be used directly:

```python
from code_racer.route_connector import RouteConnector
from code_racer.route_buffer import RouteBuffer
from code_racer.dict_loader import load_dict
from code_racer.text_encoder import encode_text
from code_racer.code_analyzer import analyze

connector = RouteConnector({("a", "b"): 1.0}, 1)
dictionary, max_word_len = load_dict("dict.txt", set(), connector)
buffer = RouteBuffer(max(16, max_word_len), connector)
text = "要编码的文本"
route, time = encode_text(text, dictionary, buffer)
report = analyze([], len(text), route, time)
```

Other modules:

- `code_racer.config_loader` provides `load_layout`, `load_punct_items`,
  `load_time_map` and `parse_time_map`.
- `code_racer.report_saver` provides `save_to_file` and `save`.
- `code_racer.cli` provides `run(config_dir)`, which runs the interactive session
  and returns the report lines.