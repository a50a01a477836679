# minitalk

A small server and client pair that passes text from one process to another
using only two POSIX signals. Each bit goes out as `SIGUSR1` (a 0) or
`SIGUSR2` (a 1).

## How a message travels

1. The byte length of the UTF-8 encoded text goes out as 32 bits, least
   significant bit first.
2. Each byte of the text goes out as 8 bits, least significant bit first.
3. A terminating zero byte ends the message.

When the server receives the terminating zero byte, it prints the message on
its own line and waits for the next message. The text must not contain a NUL
character.

## Installation

```
pip install .
```

## Usage

Start the server. It prints its process id and keeps running until it is
interrupted (Ctrl-C):

```
$ minitalk-server
Server PID: 12345
```

From another terminal, send it a message:

```
$ minitalk-client 12345 "hello there"
```

The server prints `hello there`.

The client needs exactly two arguments. The pid may contain only decimal
digits and must be greater than zero. If any check fails, the client exits
with status 1 and sends nothing. By default the client waits 0.1 ms after
each bit.

## As a library

- `minitalk.protocol.encode(text)` yields the bits for a message. It takes
  `str` or `bytes`.
- `minitalk.protocol.Decoder` rebuilds messages from bits. `feed(bit)`
  returns the finished message when its terminating byte arrives, and `None`
  until then.
- `minitalk.client.parse_pid(argv)` checks `[pid, text]` and returns the pid.
  It raises `ValueError` on bad input.
- `minitalk.client.send(pid, text, delay)` sends a message to a running
  server.
- `minitalk.server.Server(output)` turns incoming signals into bits with
  `handle(signum, frame)`. It writes each finished message as a line to
  `output`, which is stdout by default. `install()` connects the handler to
  `SIGUSR1` and `SIGUSR2`.
- `minitalk.printf.format(template, *args)` and
  `minitalk.printf.printf(template, *args, file=None)` support the
  conversions `%c %s %p %d %i %u %x %X %%`. `printf` returns the number of
  characters it wrote. Also available: `putstr`, `putendl` and `putnbr`.
- `minitalk.nextline.LineReader(fd, buffer_size)` reads a file descriptor, or
  an object with `fileno()`, one line at a time. Use `read_line()` or iterate
  over it.
- `minitalk.libstr` holds small string helpers: `atoi`, `itoa`, `split`,
  `strtrim`, `substr`, `strnstr`, `strncmp` and `recursive_power`. It also
  has the character helpers `isalpha`, `isdigit`, `isalnum`, `isascii`,
  `isprint`, `toupper` and `tolower`.

## What it does not do

The server does not acknowledge the bits it receives. The client controls its
pace only with a fixed delay after each bit. Signals from more than one
client at the same time get mixed into a single message. Only POSIX systems
are supported.

## Running the tests

```
pip install .[test]
pytest
```