# cutil

A collection of small utilities with no dependencies outside the standard library.

| Module | What it provides |
| --- | --- |
| `cutil.charconv` | `parse_int(text, base=10)` and `parse_float(text)`. Both read the longest valid prefix and raise `ValueError` when no number can be read. |
| `cutil.split` | `split(text, sep)`, which drops empty pieces, and `split_like_shell(text)`, which keeps quoted runs together. |
| `cutil.strtools` | `concat`, `conditional`, `starts_with`, `ends_with`, `substr`, `find`, `rfind`, `remove_prefix`, `remove_suffix`, `replace` and `to_string`. Search functions return `-1` (`NPOS`) when nothing is found. |
| `cutil.location` | `format_function_name` and `format_file_name`, which shorten compiler-style signatures and paths, and `location_print`. |
| `cutil.errors` | `panic` and `dynamic_assert`, which raise `PanicError`, and `StringError`, which is false when its message is empty. |
| `cutil.argparser` | `Parser` for positional arguments, keyword arguments and flags, with the value types `BOOL`, `INT`, `FLOAT`, `STR` and `int_type(bits, signed)`. |
| `cutil.logger` | `Logger`, which writes coloured, timestamped lines tagged with the caller's location, and `string_to_loglevel`. |
| `cutil.critical` | `Critical`, a value guarded by its own lock. |
| `cutil.event` | `Event`, an auto-resetting wakeup for one waiter. |
| `cutil.multi_event` | `MultiEvent`, which releases all waiting threads at once. |
| `cutil.timer_event` | `TimerEvent`, with `wait`, `wait_for(timeout)` and `wakeup`. |
| `cutil.thread_pool` | `ThreadPool` and `CustomDataThreadPool`. |
| `cutil.rcu` | `RCU`, a two-slot read-copy-update container. |
| `cutil.writers_reader_buffer` | `WritersReaderBuffer`, a double buffer with many writers and one reader. |
| `cutil.coroutine` | `CoRoutine`, which drives a generator one step at a time. |
| `cutil.fd` | `FileDescriptor`, an owned OS descriptor that reads and writes whole buffers. |
| `cutil.event_fd` | `EventFileDescriptor`, built on `os.eventfd`. It works on Linux only. |
| `cutil.file_io` | `read_file(path)` and `write_file(path, data)`. |
| `cutil.random_engine` | `RandomEngine`, which produces random bytes from a 64-bit Mersenne Twister. It accepts an optional seed. |
| `cutil.pair_table` | `PairTable`, a list of pairs that can be looked up from either side. |

## Installation

```
pip install .
```

## Examples

### Splitting and number parsing

```python
from cutil.split import split, split_like_shell
from cutil.charconv import parse_int

split("a b c", " ")                  # ['a', 'b', 'c']
split_like_shell("a \"b c\" 'd e'")  # ['a', 'b c', 'd e']
parse_int("8086", 16)                # 32902
```

### Parsing arguments

`Parser.parse` takes the full argument list, including the program name. It returns a dict that maps each destination to its value. On failure it raises `ArgumentError`.

```python
from cutil.argparser import INT, STR, ArgumentOpts, Parser, State

parser = Parser()
parser.kwarg("num", ["-n", "--num"], INT, "INT", "a number",
             initial=8086, opts=ArgumentOpts(state=State.DEFAULT_VALUE))
parser.kwflag("verbose", ["-v"], "be verbose")
parser.arg("name", STR, "STR", "a name")

print("usage: prog " + parser.get_help())
parser.parse(["prog", "-n", "2", "world"])
# {'num': 2, 'verbose': False, 'name': 'world'}
```

### Logging

`Logger("net")` reads its level from the `NET_LOGLEVEL` environment variable if that variable is set. The value may be `error`, `warn`, `info` or `debug`, or the digits `0` to `3`. Without it, the level is INFO. ERROR and WARN lines go to standard output. INFO and DEBUG lines go to standard error.

```python
from cutil.logger import Logger

log = Logger("net")
log.info("connected")
log.debug("not shown at the default level")
```

### Resumable work

```python
from cutil.coroutine import CoRoutine

def counter(limit):
    total = 0
    for i in range(limit):
        total += i
        yield total
    return -1

worker = CoRoutine()
worker.start(counter, 3)
worker.resume()  # 0
worker.resume()  # 1
worker.resume()  # 3
worker.resume()  # -1, and worker.done() is now True
```

### Lookup tables

```python
from cutil.pair_table import PairTable

table = PairTable([(1, "A"), (3, "C")])
table.find_second(1)    # 'A'
table.find_first("C")   # 3
table.find_second(2)    # None
```

## What it does not do

`cutil` is a library only. It installs no command-line program. `EventFileDescriptor` depends on `os.eventfd`, so it is unavailable outside Linux.

## Running the tests

```
pip install .[test]
pytest
```