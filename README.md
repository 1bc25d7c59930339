# pipeline_runner

This package holds the building blocks of a tool that runs shell-style
pipelines. It collects here-document input and reads streams line by line
through a fixed-size buffer. It also has a small `printf` and helpers for
strings, characters, byte buffers and linked lists.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

### `pipeline_runner.heredoc`

- `read_heredoc(limiter, reader=None, prompt_stream=None)` writes the prompt
  `> ` before each line. It reads lines (from standard input by default) until
  the limiter line or the end of input, and returns the collected text.
- `write_heredoc(limiter, reader=None, prompt_stream=None, path="/tmp/hd")`
  stores that text in `path`. It returns the file opened for reading in binary
  mode.
- `matches_limiter(line, limiter)` compares only the first `len(line) - 1`
  characters of the line with the limiter. An empty line, or a line that is a
  prefix of the limiter, therefore also ends the input.

### `pipeline_runner.linereader`

`LineReader(stream, buffer_size=10)` reads a text or binary stream in chunks of
`buffer_size`.

- `read_line()` returns the next line with its trailing newline, or `None` when
  the stream has no more data.
- Iterating over a reader yields every line.
- A `buffer_size` that is not positive raises `ValueError`.

### `pipeline_runner.printf`

- `format_printf(fmt, *args)` renders `%c %s %d %i %u %x %X %p %%`. Unknown
  conversions print nothing.
- `printf(fmt, *args, stream=None)` writes the result to the stream (standard
  output by default) and returns its length.
- `format_hex(value, upper=False)` gives the hexadecimal form of a 32-bit
  unsigned value.
- `format_pointer(address)` gives `0x` followed by lower-case hexadecimal.

### `pipeline_runner.strings`

The functions are `split`, `strdup`, `striteri`, `strjoin`, `strlcat`,
`strlcpy`, `strlen`, `strmapi`, `strncmp`, `strnstr`, `strchr`, `strrchr`,
`strtrim` and `substr`.

- Searches return an index, or `None` when nothing is found.
- `strlcpy` and `strlcat` return the resulting string together with the length
  they report.

### `pipeline_runner.chars`

The functions are `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`,
`to_upper`, `to_lower`, `atoi` and `itoa`. They accept a one-character string
or an integer code.

### `pipeline_runner.memory`

The functions are `memset`, `bzero`, `calloc`, `memchr`, `memcmp`, `memcpy` and
`memmove`. They work on mutable buffers such as `bytearray`.

### `pipeline_runner.output`

The functions are `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`. They
write to any text stream.

### `pipeline_runner.linkedlist`

`LinkedList` is a singly linked list of `Node` objects.

- It has the methods `push_front`, `push_back`, `last`, `clear`, `for_each` and
  `map`, and supports `len()` and iteration.
- `map` raises `ValueError` when the mapping function returns `None`.
- `delete_node(node, delete)` passes a node's content to `delete` and detaches
  the node.

## What this package does not do

The package installs no command. It cannot yet do any of the following:

- start commands or connect them with pipes;
- look commands up in `PATH`;
- report "command not found" or "permission denied" errors with exit codes.

It provides only the pieces listed above.