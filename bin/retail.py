#!/usr/bin/env python3

r"""
usage: retail.py [-h] [-n COUNT] [-c COUNT] [-r REGEX] [-b] [-u REGEX] [-f] [-s SECS] [-v] [FILE]

show the trailing lines of a file, or every line since the last line to match a regex

positional arguments:
  FILE                  the file to show the tail of (default: stdin)

options:
  -h, --help            show this help message and exit
  -n COUNT, --lines COUNT
                        how many trailing lines to show (default: 10)
  -c COUNT, --bytes COUNT
                        how many trailing bytes to show
  -r REGEX, --regex REGEX
                        show every line since the last line to match this regex
  -b, --first           show every line since the first match of -r, not the last
  -u REGEX, --until REGEX
                        quit after showing a line that matches this regex
  -f, --follow          don't quit at end of file, show the lines appended to it
  -s SECS, --sleep-interval SECS
                        seconds to wait for more input, while following (default: 0.5)
  -v, --version         print a hash of this code (its md5sum) and exit

quirks:
  takes a count led by "+" as how many leading lines to drop, at "-n +N" and at "+N"
  takes "-c +N" as start at the Nth byte, counting up from 1, so "-c +1" shows all
  takes "-5" as "-n 5", and "+9" as "-n +9", like mac "tail"
  takes REGEX as python "import re" defines them, plus the [[:alpha:]] etc of egrep
  quits with exit 0 at "-u" only after writing and flushing the line that matched
  doesn't follow pipes, even when asked to, since no one appends to what's been piped

unsurprising quirks:
  prompts for stdin, like mac bash "grep -R .", unlike bash "tail"
  takes "-" as meaning stdin, like linux "tail -", unlike mac "tail -"
  shows bytes as bytes, splits lines only at b"\n", never drops a last partial line

examples:
  retail.py retail.py
  retail.py -5 retail.py
  retail.py +40 retail.py
  retail.py -r '^def ' retail.py  # show the last def
  retail.py -b -r '^def ' retail.py  # show every def
  retail.py -c 16 retail.py |hexdump -C
  retail.py -f -u 'server started' /var/log/server.log
  python3 -c 'import this' |retail.py -r '^Now'
"""


import argparse
import collections
import contextlib
import hashlib
import os
import re
import signal
import stat
import sys
import time


MODE_NORMAL = "normal"
MODE_REGEX = "regex"
MODE_SKIP_START = "skip_start"
MODE_BYTES = "bytes"

DEFAULT_COUNT = 10
SLEEP_INTERVAL = 0.500  # seconds between polls, while following
CHUNK_SIZE = 0x2000  # bytes per read, while copying bytes

VALUED_OPTIONS = {
    "-n": "--lines",
    "--lines": "--lines",
    "-c": "--bytes",
    "--bytes": "--bytes",
    "-r": "--regex",
    "--regex": "--regex",
    "-u": "--until",
    "--until": "--until",
    "-s": "--sleep-interval",
    "--sleep-interval": "--sleep-interval",
}

POSIX_CLASSES = {
    b"alnum": rb"0-9A-Za-z",
    b"alpha": rb"A-Za-z",
    b"blank": rb" \t",
    b"cntrl": rb"\x00-\x1F\x7F",
    b"digit": rb"0-9",
    b"graph": rb"!-~",
    b"lower": rb"a-z",
    b"print": rb" -~",
    b"punct": rb"!-/:-@\[-`{-~",
    b"space": rb" \t\n\r\f\v",
    b"upper": rb"A-Z",
    b"xdigit": rb"0-9A-Fa-f",
}


#
# Run from the Command Line
#


# deffed in many files  # missing from docs.python.org
class BrokenPipeErrorSink(contextlib.ContextDecorator):
    """Cut unhandled BrokenPipeError down to sys.exit(1)

    Test with large Stdout cut sharply, such as:  retail.py -999999 /dev/urandom |head

    More narrowly than:  signal.signal(signal.SIGPIPE, handler=signal.SIG_DFL)
    As per https://docs.python.org/3/library/signal.html#note-on-sigpipe
    """

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        (exc_type, exc, exc_traceback) = exc_info
        if isinstance(exc, BrokenPipeError):  # catch this one

            null_fileno = os.open(os.devnull, flags=os.O_WRONLY)
            os.dup2(null_fileno, sys.stdout.fileno())  # avoid the next one

            sys.exit(1)


@BrokenPipeErrorSink()
def main(argv=None):
    """Run from the Command Line"""

    alt_argv = sys.argv if (argv is None) else argv
    prog = os.path.basename(alt_argv[0]) if (alt_argv and alt_argv[0]) else "retail"

    args = parse_retail_argv(alt_argv, prog=prog)
    if args.version:
        do_main_arg_version(prog)

        return 0

    config = config_from_args(args, prog=prog)

    stream = open_tail_stream(config.input_path, prog=prog)
    with stream.incoming:
        try:
            returncode = tail_stream(config, stream=stream)
        except KeyboardInterrupt:
            sys.exit(0x80 + signal.SIGINT)  # "128+n if terminated by signal n" <= man bash

    return returncode


def parse_retail_argv(argv, prog):
    """Convert a Retail Sys ArgV to an Args Namespace, or print some Help and quit"""

    parser = argparse_compile_argdoc(epi="quirks", prog=prog)

    parser.add_argument(
        "file",
        metavar="FILE",
        nargs="?",
        help="the file to show the tail of (default: stdin)",
    )

    parser.add_argument(
        "-n",
        "--lines",
        metavar="COUNT",
        help="how many trailing lines to show (default: 10)",
    )

    parser.add_argument(
        "-c",
        "--bytes",
        metavar="COUNT",
        help="how many trailing bytes to show",
    )

    parser.add_argument(
        "-r",
        "--regex",
        metavar="REGEX",
        help="show every line since the last line to match this regex",
    )

    parser.add_argument(
        "-b",
        "--first",
        action="count",
        help="show every line since the first match of -r, not the last",
    )

    parser.add_argument(
        "-u",
        "--until",
        metavar="REGEX",
        help="quit after showing a line that matches this regex",
    )

    parser.add_argument(
        "-f",
        "--follow",
        action="count",
        help="don't quit at end of file, show the lines appended to it",
    )

    parser.add_argument(
        "-s",
        "--sleep-interval",
        metavar="SECS",
        type=float,
        default=SLEEP_INTERVAL,
        help="seconds to wait for more input, while following (default: 0.5)",
    )

    parser.add_argument(
        "-v",
        "--version",
        action="count",
        help="print a hash of this code (its md5sum) and exit",
    )

    # Auto-correct the Args, then parse them (or print Help Lines to Stdout and Exit 0)

    argv_tail = argv_autocorrect(argv[1:])
    (args, extras) = parser.parse_known_args(argv_tail)

    for extra in extras:
        if extra.startswith("-") and (extra != "-"):
            stderr_print("{}: unrecognised option {}".format(prog, extra))
            stderr_print("Try '{} --help' for more information.".format(prog))

            sys.exit(1)  # exit 1 to reject usage

    if extras:
        stderr_print("{}: extra operand {}".format(prog, extras[0]))
        stderr_print("Try '{} --help' for more information.".format(prog))

        sys.exit(1)  # exit 1 to reject usage

    # Take the Counts apart

    args.lines = None if (args.lines is None) else count_from_chars(parser, args.lines)
    args.bytes = None if (args.bytes is None) else count_from_chars(parser, args.bytes)

    if args.sleep_interval < 0:
        parser.error("invalid SECS: {!r}".format(args.sleep_interval))

    return args


def argv_autocorrect(argv_tail):
    """Take '-5' as '-n 5', '+9' as '-n +9', and glue each Option Value onto its Option"""

    alt_argv_tail = list()

    index = 0
    while index < len(argv_tail):
        arg = argv_tail[index]
        index += 1

        # Leave alone all the Args after "--"

        if arg == "--":
            alt_argv_tail.extend(argv_tail[(index - 1) :])

            break

        # Take the classic "-5" and "+9" as Counts of Lines

        if re.match(r"^[-+][0-9]+$", arg):
            count_chars = arg[len("-") :] if arg.startswith("-") else arg
            alt_argv_tail.append("--lines=" + count_chars)

            continue

        # Accept Values that start with "-", such as:  -r '--- cut here'

        long_option = VALUED_OPTIONS.get(arg)
        if long_option and (index < len(argv_tail)):
            alt_argv_tail.append("{}={}".format(long_option, argv_tail[index]))
            index += 1

            continue

        alt_argv_tail.append(arg)

    return alt_argv_tail

    # such as:  ['-5', '-r', '-x', 'f']  ->  ['--lines=5', '--regex=-x', 'f']


def count_from_chars(parser, chars):
    """Take '+N' as (True, N), else 'N' or '-N' as (False, N) or (False, -N)"""

    if not re.match(r"^[-+]?[0-9]+$", chars):
        parser.error("invalid COUNT: {!r}".format(chars))

    plus = chars.startswith("+")
    count = int(chars, 10)

    return (plus, count)


def config_from_args(args, prog):
    """Resolve the parsed Options into one Mode, one Count, and the compiled Regexes"""

    config = tail_config(
        prog=prog,
        prefer_first_match=bool(args.first),
        follow=bool(args.follow),
        input_path=args.file,
        sleep_interval=args.sleep_interval,
    )

    # Choose the Mode, preferring -r over -c, and -c over -n

    if args.regex is not None:
        config.mode = MODE_REGEX
        config.select_regex = regex_compile_else_exit(args.regex, prog=prog)
    elif args.bytes is not None:
        (plus, count) = args.bytes
        config.mode = MODE_BYTES
        if plus:
            config.count = -max(count, 1)  # "-c +0" means "-c +1"
        else:
            config.count = max(count, 0)
    elif args.lines is not None:
        (plus, count) = args.lines
        config.mode = MODE_SKIP_START if plus else MODE_NORMAL
        config.count = max(count, 0)

    if args.until is not None:
        config.quit_regex = regex_compile_else_exit(args.until, prog=prog)

    return config


def tail_config(**kwargs):
    """Form a Configuration Record, with defaults for whatever's not given"""

    config = argparse.Namespace(
        prog="retail",
        mode=MODE_NORMAL,
        count=DEFAULT_COUNT,
        select_regex=None,
        quit_regex=None,
        prefer_first_match=False,
        follow=False,
        input_path=None,
        sleep_interval=SLEEP_INTERVAL,
    )

    unexpected = sorted(set(kwargs.keys()) - set(vars(config).keys()))
    if unexpected:
        raise TypeError("unexpected keywords: {}".format(", ".join(unexpected)))

    vars(config).update(kwargs)

    return config


def do_main_arg_version(prog):
    """Print a hash of this Code (its Md5Sum)"""

    str_hash = module_file_hash()
    version = module_file_version_zero(str_hash)
    str_short_hash = str_hash[:4]  # conveniently fewer nybbles

    print("{} {} hash {} ({})".format(prog, version, str_short_hash, str_hash))


#
# Compile Regular Expressions
#


def regex_compile_else_exit(pattern, prog):
    """Compile the Regex, else print why not and exit 1"""

    try:
        regex = regex_compile(pattern)
    except re.error as exc:
        stderr_print("{}: error compiling regex: {}".format(prog, exc))

        sys.exit(1)

    return regex


def regex_compile(pattern):
    """Compile a Pattern to match Lines of Bytes, anywhere in the Line"""

    pattern_bytes = os.fsencode(pattern)  # undo the Sys ArgV decode exactly
    re_pattern = posix_classes_to_re(pattern_bytes)

    regex = re.compile(re_pattern, flags=re.MULTILINE)

    return regex


def regex_search_line(regex, line):
    r"""Search one Line, but never its closing b"\n", as POSIX 'REG_NEWLINE' would"""

    endpos = (len(line) - 1) if line.endswith(b"\n") else len(line)
    match = regex.search(line, 0, endpos)

    return match


def posix_classes_to_re(pattern_bytes):
    """Replace each '[:alpha:]' and such inside a '[...]' with Chars of 'import re'"""

    class_regex = re.compile(rb"\[:([a-z]*):\]")

    re_pattern = bytearray()
    in_set = False

    index = 0
    while index < len(pattern_bytes):
        byte = pattern_bytes[index : (index + 1)]

        # Pass through each Backslash Escape whole, in or out of a Set

        if byte == b"\\":
            re_pattern += pattern_bytes[index : (index + 2)]
            index += 2

            continue

        # Open a Set, taking a leading "^" and then a leading "]" as part of it

        if not in_set:
            re_pattern += byte
            index += 1

            if byte == b"[":
                in_set = True
                for lead in (b"^", b"]"):
                    if pattern_bytes[index : (index + 1)] == lead:
                        re_pattern += lead
                        index += 1

            continue

        # Close the Set, or translate a Class inside it

        if byte == b"]":
            in_set = False
            re_pattern += byte
            index += 1

            continue

        match = class_regex.match(pattern_bytes, index)
        if not match:
            re_pattern += byte
            index += 1

            continue

        name = match.group(1)
        if name not in POSIX_CLASSES:
            raise re.error("unknown POSIX class [:{}:]".format(name.decode()))

        re_pattern += POSIX_CLASSES[name]
        index = match.end()

    return bytes(re_pattern)

    # such as:  b'^[[:digit:]]+ '  ->  b'^[0-9]+ '
    # but leave b'x[:digit:]' alone, as a Set of the Chars ':', 'd', 'i', 'g', 't'


#
# Open the Input, and say what it can do
#


def open_tail_stream(path, prog):
    """Open the File, else Stdin, else print why not and exit 1"""

    if (path is None) or (path == "-"):
        prompt_tty_stdin()
        incoming = open(sys.stdin.fileno(), mode="rb", closefd=False)

        return describe_stream(incoming, path="-")

    try:
        incoming = open(path, mode="rb")
    except OSError as exc:
        reason = exc.strerror if exc.strerror else exc
        stderr_print("{}: error opening '{}': {}".format(prog, path, reason))

        sys.exit(1)  # exit 1 to require input file found

    return describe_stream(incoming, path=path)


def describe_stream(incoming, path):
    """Say if the Input can seek back, and if it is a Pipe that can't be appended to"""

    try:
        st_mode = os.fstat(incoming.fileno()).st_mode
    except (OSError, ValueError):  # such as 'io.UnsupportedOperation' of 'io.BytesIO'
        st_mode = None

    is_pipe = False
    if st_mode is not None:
        is_pipe = stat.S_ISFIFO(st_mode) or stat.S_ISSOCK(st_mode)

    seekable = False
    if not is_pipe:
        try:
            seekable = incoming.seekable()
            if seekable:
                incoming.tell()
        except OSError:
            seekable = False

    if st_mode is None:
        is_pipe = not seekable  # call it a Pipe when we can't ask

    stream = argparse.Namespace(
        incoming=incoming, path=path, is_pipe=is_pipe, seekable=seekable
    )

    return stream


#
# Read the Input, and write the Output
#


class LineReader:
    r"""Read the Input one Line at a time, else one Chunk of Bytes at a time

    Returns each Line with its b"\n" Line End, but returns a last partial Line
    without, and returns None at the end of the Input that's arrived so far

    Reports the first Read or Seek Error to Stderr, and then acts as if at end of
    Input, with '.broken' set
    """

    def __init__(self, incoming, prog="retail", path="-"):
        self.incoming = incoming
        self.prog = prog
        self.path = path
        self.broken = False

    def __iter__(self):
        while True:
            line = self.read_line()
            if line is None:

                break

            yield line

    def read_line(self):
        """Read the next Line, else None"""

        if self.broken:

            return None

        try:
            line = self.incoming.readline()
        except BlockingIOError:

            return None  # no more Input has arrived yet

        except OSError as exc:
            self.break_for(exc, verb="reading")

            return None

        if not line:

            return None

        return line

    def read_chunk(self, size):
        """Read the next Chunk of up to Size Bytes, else None"""

        if self.broken:

            return None

        try:
            chunk = self.incoming.read1(size)
        except BlockingIOError:

            return None

        except OSError as exc:
            self.break_for(exc, verb="reading")

            return None

        if not chunk:

            return None

        return chunk

    def tell(self):
        """Say how far into the Input we've read, else None"""

        if self.broken:

            return None

        try:
            offset = self.incoming.tell()
        except OSError as exc:
            self.break_for(exc, verb="seeking")

            return None

        return offset

    def seek(self, offset, whence=os.SEEK_SET):
        """Move to read from elsewhere in the Input, and say where, else None"""

        if self.broken:

            return None

        try:
            alt_offset = self.incoming.seek(offset, whence)
        except OSError as exc:
            self.break_for(exc, verb="seeking")

            return None

        return alt_offset

    def break_for(self, exc, verb):
        self.broken = True

        reason = exc.strerror if exc.strerror else exc
        stderr_print("{}: error {} '{}': {}".format(self.prog, verb, self.path, reason))


class QuitPredicate:
    """Say when to quit, just after writing a Line that matches the Quit Regex"""

    def __init__(self, regex):
        self.regex = regex
        self.partial = b""  # the Bytes written since the last b"\n"

    def should_quit(self, data):
        """True if the Quit Regex matches a Line that these Bytes end"""

        index = self.quit_index(data)

        return index is not None

    def quit_index(self, data):
        """Count the Bytes to write through the first Line that matches, else None"""

        if self.regex is None:

            return None

        # Match each whole Line, joining its pieces, but not yet its unterminated tail

        start = 0
        while True:
            end = data.find(b"\n", start)
            if end < 0:
                self.partial += data[start:]

                return None

            line = self.partial + data[start:end]
            self.partial = b""

            if self.regex.search(line):

                return end + 1

            start = end + 1

    def should_quit_at_end(self):
        """True if the Quit Regex matches the unterminated last Line of the Input"""

        line = self.partial
        self.partial = b""

        if (self.regex is None) or not line:

            return False

        match = self.regex.search(line)

        return bool(match)


class TailWriter:
    """Write Bytes to Stdout, and exit 0 just after writing a Line that calls to quit"""

    def __init__(self, outgoing, quit_predicate, flushing):
        self.outgoing = outgoing
        self.quit_predicate = quit_predicate
        self.flushing = flushing

    def write(self, data):
        index = self.quit_predicate.quit_index(data)
        if index is None:
            self.outgoing.write(data)
            if self.flushing:
                self.outgoing.flush()

            return

        self.outgoing.write(data[:index])
        self.outgoing.flush()

        sys.exit(0)  # exit 0 after showing the Line that matched

    def finish(self):
        """Flush, and exit 0 if an unterminated last Line calls to quit"""

        self.outgoing.flush()

        if self.quit_predicate.should_quit_at_end():

            sys.exit(0)  # exit 0 after showing the Line that matched

    def flush(self):
        self.outgoing.flush()


#
# Choose what to write
#


def tail_stream(config, stream, outgoing=None):
    """Write the chosen Suffix of the Input, then follow the Input, if asked"""

    alt_outgoing = sys.stdout.buffer if (outgoing is None) else outgoing

    follow = config.follow and not stream.is_pipe

    flushing = bool(follow or config.quit_regex or (config.mode == MODE_BYTES))
    quit_predicate = QuitPredicate(config.quit_regex)
    writer = TailWriter(alt_outgoing, quit_predicate=quit_predicate, flushing=flushing)

    reader = LineReader(stream.incoming, prog=config.prog, path=stream.path)

    # Write the chosen Suffix

    mode = config.mode
    if mode == MODE_REGEX:
        if stream.seekable:
            tail_regex_seekable(
                reader,
                writer,
                regex=config.select_regex,
                prefer_first_match=config.prefer_first_match,
            )
        else:
            tail_regex_unseekable(
                reader,
                writer,
                regex=config.select_regex,
                prefer_first_match=config.prefer_first_match,
            )
    elif mode == MODE_BYTES:
        tail_bytes(reader, writer, count=config.count, seekable=stream.seekable)
    elif mode == MODE_SKIP_START:
        tail_skip_start(reader, writer, count=config.count)
    else:
        assert mode == MODE_NORMAL, mode
        tail_lines(reader, writer, count=config.count)

    if not follow:
        writer.finish()  # match a last Line that didn't end with b"\n"

        return 0

    writer.flush()

    # Follow the Input, till quit, or killed, or broken

    if not reader.broken:
        if mode == MODE_BYTES:
            follow_bytes(reader, writer, sleep_interval=config.sleep_interval)
        else:
            follow_lines(reader, writer, sleep_interval=config.sleep_interval)

        return 1  # exit 1 after a Read Error broke the Follow

    return 0


def tail_lines(reader, writer, count):
    """Write the last Count Lines"""

    lines = collections.deque(maxlen=max(count, 0))
    for line in reader:
        lines.append(line)

    for line in lines:
        writer.write(line)


def tail_skip_start(reader, writer, count):
    """Drop the first Count Lines, and write the rest"""

    for (index, line) in enumerate(reader):
        if index >= count:
            writer.write(line)


def tail_regex_seekable(reader, writer, regex, prefer_first_match):
    """Write every Line since the last (or first) Line to match, by seeking back to it"""

    # Find where the Anchor Line starts

    anchor_offset = None
    while True:
        offset = reader.tell()
        if offset is None:

            break

        line = reader.read_line()
        if line is None:

            break

        if regex_search_line(regex, line):
            anchor_offset = offset
            if prefer_first_match:

                break

    # Write the Anchor Line and every Line after it

    if anchor_offset is None:

        return

    if reader.seek(anchor_offset) is None:

        return

    for line in reader:
        writer.write(line)


def tail_regex_unseekable(reader, writer, regex, prefer_first_match):
    """Write every Line since the last (or first) Line to match, by holding them all"""

    lines = None  # None till the first match

    for line in reader:
        if regex_search_line(regex, line):
            if (lines is None) or not prefer_first_match:
                lines = list()  # forget what came before this later Anchor Line

        if lines is not None:
            lines.append(line)

    for line in lines if lines else list():
        writer.write(line)


def tail_bytes(reader, writer, count, seekable):
    """Write the last Count Bytes, else the Bytes from the -Count'th Byte onwards"""

    # Seek to the Bytes to write, when we can

    if seekable:
        if count >= 0:
            end = reader.seek(0, os.SEEK_END)
            if end is None:

                return

            if reader.seek(max(end - count, 0)) is None:

                return

        elif reader.seek(-count - 1) is None:

            return

        copy_chunks(reader, writer)

        return

    # Else hold just the trailing Count Bytes till the end

    if count >= 0:
        window = b""
        while True:
            chunk = reader.read_chunk(CHUNK_SIZE)
            if chunk is None:

                break

            joined = window + chunk
            window = joined[max(len(joined) - count, 0) :]

        if window:
            writer.write(window)

        return

    # Else read past the leading Bytes to drop, and copy the rest

    skip = -count - 1
    while skip > 0:
        chunk = reader.read_chunk(min(skip, CHUNK_SIZE))
        if chunk is None:

            return

        skip -= len(chunk)

    copy_chunks(reader, writer)


def copy_chunks(reader, writer):
    """Copy the rest of the Input, as it is, Chunk by Chunk"""

    while True:
        chunk = reader.read_chunk(CHUNK_SIZE)
        if chunk is None:

            break

        writer.write(chunk)


#
# Follow the Input, as it grows
#


def follow_lines(reader, writer, sleep_interval=SLEEP_INTERVAL):
    """Write each Line appended to the Input, till quit, or killed, or broken"""

    while not reader.broken:
        line = reader.read_line()
        if line is None:
            time.sleep(sleep_interval)

            continue

        writer.write(line)


def follow_bytes(reader, writer, sleep_interval=SLEEP_INTERVAL):
    """Write each Chunk of Bytes appended to the Input, till quit, or killed, or broken"""

    while not reader.broken:
        chunk = reader.read_chunk(CHUNK_SIZE)
        if chunk is None:
            time.sleep(sleep_interval)

            continue

        writer.write(chunk)


#
# Define some Python idioms
#


class ArgumentParser(argparse.ArgumentParser):
    """Exit 1, not the 2 of ArgParse, when rejecting usage"""

    def error(self, message):
        self.print_usage(sys.stderr)
        stderr_print("{}: error: {}".format(self.prog, message))

        sys.exit(1)  # exit 1 to reject usage


# deffed in many files  # missing from docs.python.org
def argparse_compile_argdoc(epi, prog=None, doc=None):
    """Construct the 'ArgumentParser' with Epilog but without Arguments"""

    module_doc = __doc__ if (doc is None) else doc

    # Pick the ArgParse Prog, Description, & Epilog out of the Main Arg Doc

    doc_prog = module_doc.strip().splitlines()[0].split()[1]

    headlines = list(
        _ for _ in module_doc.strip().splitlines() if _ and not _.startswith(" ")
    )
    description = headlines[1]

    epilog_at = module_doc.index(epi)
    epilog = module_doc[epilog_at:]

    # Start forming the ArgParse Parser

    parser = ArgumentParser(
        prog=(prog if prog else doc_prog),
        description=description,
        formatter_class=argparse.RawTextHelpFormatter,
        epilog=epilog,
    )

    return parser


# deffed in many files  # missing from docs.python.org
def module_file_hash():
    """Hash the Bytes of this SourceFile"""

    abs_module_file = os.path.abspath(__file__)
    with open(abs_module_file, "rb") as reading:
        file_bytes = reading.read()

    hasher = hashlib.md5()
    hasher.update(file_bytes)
    hash_bytes = hasher.digest()

    str_hash = hash_bytes.hex()
    str_hash = str_hash.upper()  # such as 32 nybbles 'D41D8CD98F00B204E9800998ECF8427E'

    return str_hash


# deffed in many files  # missing from docs.python.org
def module_file_version_zero(str_hash):
    """Pick a conveniently small, reasonably distinct, decimal Version Number"""

    major = 0
    minor = int(str_hash[0], 0x10)  # 0..15
    micro = int(str_hash[1:][:2], 0x10)  # 0..255

    version = "{}.{}.{}".format(major, minor, micro)

    return version


# deffed in many files  # missing from docs.python.org
def prompt_tty_stdin():
    if sys.stdin.isatty():
        stderr_print("Press ⌃D EOF to quit")  # or ⌃C SIGINT or ⌃\ SIGQUIT


# deffed in many files  # missing from docs.python.org
def stderr_print(*args):
    """Print the Args, but to Stderr, not to Stdout"""

    sys.stdout.flush()
    print(*args, file=sys.stderr)
    sys.stderr.flush()  # esp. when kwargs["end"] != "\n"


if __name__ == "__main__":
    sys.exit(main(sys.argv))


# copied from:  git clone https://github.com/pelavarre/pybashish.git
