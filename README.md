# hellodemo

A small command-line program and library that prints a greeting.

## Installation

```
pip install .
```

## Command line

```
hellodemo
```

This prints `hello world` to standard output and exits with status 0.
It adds no trailing newline. The command takes no options.

The same command can also be started with:

```
python -m hellodemo.greeting
```

## Library use

The package has three modules:

- `hellodemo.utils.Utils` builds the greeting text.
- `hellodemo.output.Output` writes text to any text stream.
- `hellodemo.greeting` puts the two together: `greeting(stream=None)` writes
  the greeting, and `main(argv=None)` is the command's entry point.

Build the greeting text:

```python
from hellodemo.utils import Utils

Utils().generate_greeting_string()  # "hello world"
```

Write text to a stream. The text is written unchanged, and `write` returns
the writer, so calls can be chained:

```python
import io
from hellodemo.output import Output

buf = io.StringIO()
Output().write(buf, "hello").write(buf, " world")
buf.getvalue()  # "hello world"
```

Write the greeting to a stream of your choice; with no stream it goes to
standard output:

```python
import io
from hellodemo.greeting import greeting

buf = io.StringIO()
greeting(buf)
buf.getvalue()  # "hello world"
```

## Running the tests

```
pip install .[test]
pytest
```