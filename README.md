# localkit

A small collection of everyday helpers with no third-party dependencies.

| Module | What it provides |
| --- | --- |
| `localkit.crayon` | ANSI escape codes as the `Crayon` enum, and `paint(text, *crayons)` to wrap text in them and reset afterwards. |
| `localkit.diagnostics` | `warningf` and `errorf` write a `(Line N in FILE): ` tagged message to standard error. `errorf` then raises `FatalError`. `check(condition, fmt, *args)` raises `FatalError` at the caller's location when the condition is false. |
| `localkit.strings` | Trimming (`trim`, `trim_left`, `trim_right`), searching (`strloc`, `strfind`), slicing (`substr`, `substring`, `cut_before_delim`, `cut_before_delims`, `truncate_from_left`), character classes (`is_decimal`, `is_hexadecimal`, `is_letter`, ...), and number parsing with `0x`, `0o` and `0b` prefixes (`to_number`, `is_strictly_valid_number`, `NumberBase`). |
| `localkit.kvmap` | `KVMap`, a string-keyed hash map with a fixed number of slots and djb2 hashing (`hash_djb2`). `insert` keeps an existing value and `force_insert` replaces it. It also has `get`, `retrieve`, `remove`, `clear` and `items`, and supports `in`, `len()` and iteration over keys. |
| `localkit.vector` | `Vector`, a sequence with front and back push, peek and pop. Its capacity grows in steps of 20. It also has `at`, `remove(target, comp)`, `apply` and `meta_info`. |
| `localkit.linkedlist` | `LinkedList`, which grows at either end with `insert_front` and `insert_back`. It refuses `None` elements. |
| `localkit.env` | `.env` loading: `parse_env(lines)`, `Environment.load(filename)`, and the module-level `init`, `get`, `exists`, `display`, `end` and `diagnostics`. |
| `localkit.httpparse` | Parsing of HTTP/1.1 and HTTP/1.2 messages: `analyze_request`, `analyze_response`, `parse_headers` and `parse_query`. It also provides `status_message`, `method_name`, the `HttpMethod` enum and the `HttpRequest` and `HttpResponse` dataclasses. Malformed input raises `HttpParseError`. |

## Installation

```
pip install .
```

## Examples

### Load settings from a `.env` file

```python
from localkit.env import Environment

env = Environment.load(".env")
port = env.get("PORT")   # None when the key is missing
```

The file is read as `KEY=VALUE` lines:

- Blank lines are skipped.
- Surrounding spaces are trimmed.
- A later key replaces an earlier one.

The loader raises these errors:

- `EnvFileError` when the file cannot be opened.
- `EnvError` when a line is malformed.

If `Environment.load()` is called without a file name, it warns on standard error and reads `.env`.

### Parse an HTTP request

```python
from localkit.httpparse import analyze_request

raw = "GET /search?q=books&page=2 HTTP/1.1\r\nHost: example.com\r\n\r\n"
request = analyze_request(raw)
request.method              # HttpMethod.GET
request.target_path()       # "/search"
query = request.parse_query()
query.get("q")              # "books"
query.get("page")           # "2"
request.header_get("Host")  # "example.com"
```

`parse_query` returns a `KVMap`, or `None` when there is no query string. Responses are checked more strictly:

- The status code must be one the package knows.
- The reason phrase must match that code, as given by `status_message(code)`.

### Parse numbers with base prefixes

```python
from localkit.strings import to_number

to_number("0x1F")   # 31
to_number("0b101")  # 5
to_number("abc")    # None
```

## What it does not do

localkit only parses HTTP text that you already have:

- It opens no sockets.
- It has no HTTP client or server.

The package installs no command-line programs.

## Running the tests

```
pip install ".[test]"
pytest
```