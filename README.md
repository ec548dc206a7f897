# tikwire

tikwire provides the low-level pieces a client needs to talk to a RouterOS
device over its API protocol. It has no runtime dependencies.

## What is in the package

- **`tikwire.request`**: `encode_length(length)` and `encode_word(word)`
  produce the variable-size length prefix and a length-prefixed word.
  `Request(command, tag)` builds a command sentence. `add_param(key, value)`
  stores a word as `=key`. `add_attribute(key, value)` stores it as `.key`.
  `add_word(key, value, *args)` stores a raw key, and any extra arguments are
  formatted into `value` with `str.format`. A key that is already present
  keeps its first value. Set `request.query` to a list of query words to send
  after the other words. `encode()` returns the whole sentence as bytes: the
  command, `.tag=N`, the words in key order, the query words and a closing
  empty word.
- **`tikwire.response`**: `Response(words)` parses a reply sentence. `type` is
  a `ResponseType` (`NORMAL`, `DATA`, `TRAP`, `FATAL`, `UNKNOWN`), and `tag`
  is taken from the `.tag` attribute or is `None`. `error` is an `ErrorCode`.
  For a `!trap` reply it comes from the `category` word, or else from well-known
  texts in `message`. Parameters are stored under their bare name; attributes
  keep their leading dot. Iterating a `Response` yields `(key, value)` pairs.
  `is_valid_response(words)` checks that the first word starts with `!`.
- **`tikwire.wire`**: `decode_length(data)` decodes a length prefix from
  bytes. The coroutines `read_word_length`, `read_word` and `read_response`
  read from an `asyncio.StreamReader`. `read_response` raises `ApiError` for an
  invalid, `!fatal` or untagged reply. `!trap` replies are returned with their
  `error` set. `open_connection(host, port)` opens a TCP stream to a literal IP
  address.
- **`tikwire.errors`**: `ErrorCode`, an `IntEnum`, and `ApiError`, whose
  `code` attribute holds the `ErrorCode`.
- **`tikwire.query`**: `QueryToken(name)` and `Query` build query words with
  Python operators. On a token, `==`, `!=`, `<`, `>`, `<=` and `>=` each give a
  `Query`. `~token` gives `?-name`, and `token.to_query()` gives `?name`. On a
  `Query`, `&`, `|`, `^` and `~` combine queries. `make_tokens(*names)` creates
  several tokens at once.
- **`tikwire.types`**: value types for item properties.
  - `Identity` holds `*HEX` item ids. Use `Identity.from_string("*1A")`;
    `str()` gives `*1A`.
  - `Bytes` holds byte counts. It has `kb()` to `pb()` and `human_readable()`,
    for example `1.50 KB`.
  - `Duration` holds whole seconds. `Duration.from_string` accepts forms such
    as `1w2d3h4m5s` or `01:02:03`. `human_readable()` gives for example
    `1 Day, 2 Hours`, and `str()` gives `93600s`.
- **`tikwire.convert`**: `convert(text, kind)` turns a word value into `str`,
  `bool`, `int`, `float` or a type with `from_string`. `convert_back(value)`
  renders a value for a word, with booleans as `true` and `false`.

## Example

```python
import asyncio

from tikwire.query import QueryToken
from tikwire.request import Request
from tikwire.wire import open_connection, read_response


async def main():
    reader, writer = await open_connection("192.0.2.1", 8728)

    request = Request("/interface/print", 1)
    request.query = list(QueryToken("type") == "ether")
    writer.write(request.encode())
    await writer.drain()

    while True:
        response = await read_response(reader)
        for key, value in response:
            print(key, "=", value)
        if response.type.name != "DATA":
            break

    writer.close()
    await writer.wait_closed()


asyncio.run(main())
```

## What the package does not do

tikwire is a set of building blocks, not a complete client. It does not log
in, and it does not hand out tags. It does not match replies to the requests
that caused them. It has no typed item models and no ready-made add, set,
getall, listen or remove commands. It offers no TLS connection helper and no
command-line program. Those steps are left to the code that uses these pieces.

## Running the tests

```
pip install -e ".[test]"
pytest
```