"""General-purpose commands: arithmetic, echo, HTTP fetch and sleep."""

from __future__ import annotations

import http.client
import math
import re
import urllib.error
import urllib.request

from .base import Command, interrupt_requested

_INT_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?[0-9]+)")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_FLOAT_PREFIX = re.compile(
    r"[ \t\n\v\f\r]*(?P<number>[+-]?(?:"
    r"(?P<hex>0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?[0-9]+)?)"
    r"|inf(?:inity)?|nan"
    r"|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"
    r"))",
    re.IGNORECASE,
)


def _leading_int(text: str) -> tuple[int, int]:
    """Parse a leading 32-bit integer; return it and the number of characters used.

    Raises ValueError when no digits lead the text and OverflowError when the
    value does not fit in 32 bits.
    """
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    value = int(match.group(1))
    if not _INT_MIN <= value <= _INT_MAX:
        raise OverflowError(f"integer out of range: {text!r}")
    return value, match.end()


def _leading_float(text: str) -> float:
    """Parse the floating-point number that leads ``text``; ValueError if none."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no number in {text!r}")
    number = match.group("number")
    if match.group("hex"):
        negative = number.startswith("-")
        magnitude = number.lstrip("+-")
        mantissa = magnitude if "p" in magnitude.lower() else magnitude + "p0"
        value = float.fromhex(mantissa)
        return -value if negative else value
    return float(number)


class AddCommand(Command):
    name = "add"
    description = "Sum the numbers"
    usage = "add <num1> [num2] [num...]"

    def execute(self, args, stdin, out, err, system) -> int:
        if not self.require_args(args, 2, err):
            return 1
        total = 0.0
        for arg in args:
            try:
                value = _leading_float(arg)
            except ValueError:
                err.write(f"Error: invalid number: '{arg}'\n")
                return 1
            previous = total
            new_total = previous + value
            if new_total == previous:
                err.write(
                    f"Error: precision lost (addition had no effect) for '{arg}' "
                    f"(partial sum: {previous:g})\n"
                )
                return 1
            if new_total - previous != value:
                err.write(
                    f"Error: rounding occurred while adding '{arg}' "
                    f"(added: {value:g}, actual increment: {new_total - previous:g})\n"
                )
                return 1
            if math.isinf(new_total):
                err.write(
                    f"Error: overflow occurred while adding '{arg}' "
                    f"(partial sum: {previous:g})\n"
                )
                return 1
            total = new_total
        out.write(f"Sum: {total:g}\n")
        return 0


class EchoCommand(Command):
    name = "echo"
    description = "Print text to output"
    usage = "echo <text>"

    def execute(self, args, stdin, out, err, system) -> int:
        out.write(" ".join(args) + "\n")
        return 0


class CurlCommand(Command):
    name = "curl"
    description = "HTTP GET request"
    usage = "curl <url>"

    def execute(self, args, stdin, out, err, system) -> int:
        if not self.require_args(args, 1, err, 1):
            return 1
        url = args[0]
        if "://" not in url:
            url = "http://" + url
        try:
            with urllib.request.urlopen(url) as response:
                body = response.read()
        except urllib.error.HTTPError as exc:
            # A server reply with an error status still delivers its body.
            body = exc.read()
            exc.close()
        except (urllib.error.URLError, http.client.HTTPException, OSError, ValueError) as exc:
            reason = getattr(exc, "reason", exc)
            err.write(f"curl: {reason}\n")
            return 1
        out.write(body.decode("utf-8", errors="replace"))
        return 0


class SleepCommand(Command):
    name = "sleep"
    description = "Sleep for provided seconds"
    usage = "sleep <seconds>"

    def execute(self, args, stdin, out, err, system) -> int:
        if not self.require_args(args, 1, err, 1):
            return 1
        text = args[0]
        try:
            seconds, used = _leading_int(text)
        except OverflowError:
            err.write("Error: value out of range for seconds\n")
            return 1
        except ValueError:
            err.write("Error: Invalid number\n")
            return 1
        if used != len(text):
            err.write("Error: invalid characters in seconds argument\n")
            return 1
        if seconds < 0:
            err.write("Error: seconds must be non-negative\n")
            return 1

        out.write(f"Sleeping for {seconds} seconds...\n")
        out.write("(Press Ctrl+C to interrupt)\n")
        out.flush()

        for elapsed in range(seconds):
            for _ in range(10):
                if interrupt_requested.is_set():
                    out.write(f"\nInterrupted after {elapsed} seconds\n")
                    out.flush()
                    return 130
                interrupt_requested.wait(0.1)

        out.write("Wake up!\n")
        out.flush()
        return 0