# sampler

`sampler` is a collection of small, focused tools. Each one does a single
job, and each is usable both from the command line and as a Python library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Library overview

| Module              | What it offers |
|---------------------|----------------|
| `sampler.echo`      | `echo`, `join_args`, `indexed_args`, `hello` |
| `sampler.dup`       | `count_lines`, `count_file_text`, `duplicates`, `dedup` |
| `sampler.word`      | `is_byte_palindrome`, `is_palindrome` (letters only, case ignored) |
| `sampler.textutil`  | `basename`, `comma`, `ints_to_string`, `nonempty`, `reverse`, `rotate_left`, `append_int`, `append_slice`, `IntSlice` |
| `sampler.tempconv`  | `Celsius`, `Fahrenheit`, `c_to_f`, `f_to_c` |
| `sampler.popcount`  | `pop_count`, which counts the set bits of a 64-bit value |
| `sampler.netflag`   | `Flags`, `is_up`, `turn_down`, `set_broadcast`, `is_cast` |
| `sampler.treesort`  | `sort`, which sorts in place using a binary tree |
| `sampler.graph`     | `Graph` with `add_edge` and `has_edge` |
| `sampler.charcount` | `count_chars` and `CharCounts.report` |
| `sampler.digest`    | `sum256` and `target` |
| `sampler.geometry`  | `Point`, `Circle`, `Wheel` |
| `sampler.movie`     | `Movie`, `to_json`, `titles` |
| `sampler.lissajous` | `frames` and `lissajous`, which writes an animated GIF |
| `sampler.mandelbrot`| `mandelbrot`, `acos`, `sqrt`, `newton`, `render` |
| `sampler.surface`   | `f`, `corner`, `svg` |
| `sampler.jpeg`      | `to_jpeg`, which converts an image stream to JPEG |
| `sampler.fetch`     | `fetch`, `fetch_timed`, `fetch_all` |
| `sampler.servers`   | `EchoHandler`, `CountingHandler`, `RequestEchoHandler`, `make_server` |
| `sampler.params`    | `unpack`, `search`, `SearchParams`, `ParamError` |
| `sampler.github`    | `search_issues`, `parse_result`, `Issue`, `User`, `IssuesSearchResult`, `SearchError` |
| `sampler.issues`    | `format_table`, `days_ago`, `render_report`, `render_html`, `autoescape_demo` |
| `sampler.atoms`     | `format_any` |
| `sampler.display`   | `display` and `display_lines`, which walk a value's structure |
| `sampler.methods`   | `method_lines` and `print_methods` |
| `sampler.equal`     | `equal`, a deep equality check that handles cycles |
| `sampler.bzip`      | `Writer`, a bzip2-compressing writer |
| `sampler.sexpr`     | `marshal`, `marshal_indent`, `unmarshal`, `SexprError` |

### A few examples

```python
from sampler.word import is_palindrome
is_palindrome("A man, a plan, a canal: Panama")   # True

from sampler.textutil import basename, comma
basename("a/b.c.go")       # "b.c"
comma("1234567890")        # "1,234,567,890"

from sampler.tempconv import f_to_c
str(f_to_c(212.0))         # "100°C"

from sampler.popcount import pop_count
pop_count(0xFF)            # 8

from sampler.equal import equal
equal([1, 2, 3], [1, 2, 3])  # True
```

S-expressions go in both directions:

```python
from sampler.sexpr import marshal, marshal_indent, unmarshal

data = marshal(value)
pretty = marshal_indent(value)
restored = unmarshal(data, type(value))
```

## Command-line tools

Every command below is installed with the package.

```
sampler-echo -n -s , a b c         # join arguments; -n drops the newline, -s sets the separator
sampler-dup FILE...                # print lines that appear more than once, with their counts
sampler-textutil                   # reverse the whole numbers on each line of standard input
sampler-cf 32 212                  # convert each argument between Celsius and Fahrenheit
sampler-netflag                    # demonstrate bit-field flag operations
sampler-charcount < FILE           # count Unicode characters and UTF-8 encoding lengths
sampler-sha256                     # show the SHA-256 digests of "x" and "X"
sampler-movie                      # print a small movie list as JSON
sampler-lissajous > out.gif        # write an animated Lissajous figure
sampler-mandelbrot > out.png       # write a PNG of the Mandelbrot set
sampler-surface > out.svg          # write an SVG rendering of a 3-D surface
sampler-jpeg < in.png > out.jpg    # convert an image to JPEG
sampler-fetch URL...               # print the body found at each URL
sampler-fetchall URL...            # fetch URLs concurrently and report times and sizes
sampler-server                     # start a small HTTP echo server on localhost:8000
sampler-search                     # start the search endpoint that demonstrates parameter unpacking
sampler-issues TERM...             # list GitHub issues that match the search terms
sampler-bzip < in > out.bz2        # bzip2-compress standard input
```

Errors go to standard error, and the command exits with a non-zero status.