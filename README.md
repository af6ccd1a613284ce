# vdomhtml

Pure-Python building blocks for working with HTML. The package provides the following:

- `Bytes`: byte strings that can be changed in place.
- Fast scanning helpers and a byte cursor.
- Small containers that record when they outgrow their inline capacity.
- Parser options.
- An element attribute collection.
- A CSS-style query selector language with matching against element-like objects.

It has no dependencies outside the standard library.

## Installation

```
pip install vdomhtml
```

## Byte strings: `vdomhtml.bytes`

A `Bytes` value holds raw data. A `Bytes` built from existing data is *borrowed*. Calling `set` gives it content of its own, and it is then *owned*.

```python
from vdomhtml.bytes import Bytes

b = Bytes("hello")
b.as_bytes_borrowed()   # b"hello"
b.set("world")          # returns None: the previous data was borrowed
b.is_owned()            # True
b.as_bytes_borrowed()   # None
b == "world"            # True; compares with str, bytes and Bytes
b.try_as_utf8_str()     # "world" (None if not valid UTF-8)
```

`Bytes.set` returns the previous data if it was owned. It raises `SetBytesError` (from `vdomhtml.errors`) for data longer than `MAX_LENGTH` (0xFFFFFFFF bytes). `copy()` returns an independent value with the same content and ownership.

## Scanning: `vdomhtml.scan`

The module provides these functions:

| Function | What it does |
| --- | --- |
| `is_ident(c)` | Tests for identifier bytes: ASCII letters, digits and `- _ : + /`. |
| `to_lower(byte)` | Converts an ASCII byte to lower case. |
| `is_closing(c)` | Tests for `/` or `>`. |
| `find(haystack, needle)` | Finds one byte. |
| `find4(haystack, needle)` | Finds the first byte that is any of several bytes. |
| `search_non_ident(haystack)` | Finds the first byte that is not an identifier byte. |
| `matches_case_insensitive(haystack, needle)` | Compares against a lower-case needle, ignoring case. |

The search functions return an index or `None`.

```python
from vdomhtml.scan import find, find4, search_non_ident, matches_case_insensitive

find(b"abcd ", ord(" "))                     # 4
find4(b"ef a", b"abcd")                      # 3
search_non_ident(b"short_<")                 # 6
matches_case_insensitive(b"hTmL", b"html")   # True
```

`Stream` is a cursor over a byte string. It provides:

- `current()`
- `advance()` and `advance_by(step)`
- `expect_and_skip(byte)`, `expect_oneof_and_skip(bytes)` and `expect_and_skip_cond(byte)`
- `is_eof()`
- `slice(start, end)`, which raises `IndexError` when the range is out of bounds
- `slice_checked` and `slice_len`

## Containers: `vdomhtml.inline_vec` and `vdomhtml.inline_map`

`InlineVec(capacity)` is a list that moves to the heap when an item is pushed while it already holds `capacity` items. `is_heap_allocated()` then stays true.

It offers these operations:

- `push` and `set`
- `get`, which returns `None` when the index is out of bounds
- `remove(index)`, which raises `IndexError` when the index is out of bounds
- `to_list` and `copy`

`InlineHashMap(capacity)` behaves the same way for key/value pairs. While inline, its lookups scan the pairs and its iteration follows insertion order.

It offers these operations:

- `insert`
- `get` and `remove`, which return `None` for a missing key
- `replace`
- `contains_key` / `in`
- `items`, `to_dict` and `copy`

```python
from vdomhtml.inline_vec import InlineVec

v = InlineVec(4)
for i in range(4):
    v.push(i * 2)
v.is_heap_allocated()   # False
v.push(42)
v.is_heap_allocated()   # True
v.to_list()             # [0, 2, 4, 6, 42]
```

## Parser options: `vdomhtml.options`

`ParserOptions` is an immutable set of flags. Each tracking method returns new options:

```python
from vdomhtml.options import ParserOptions

opts = ParserOptions().track_ids().track_classes()
opts.is_tracking_ids(), opts.is_tracking_classes()   # (True, True)
opts.to_raw()                                        # 3
ParserOptions.from_raw_checked(4)                    # None: unknown bit
```

The module also defines the following:

- `ParserFlag`
- `COMMENT` (`b"--"`)
- `VOID_TAGS`, the tags that never have content

## Attributes: `vdomhtml.attributes`

`Attributes` stores an element's attributes. `id` and `class` are kept apart from the rest. Values are `Bytes`, or `None` for an attribute present without a value.

```python
from vdomhtml.attributes import Attributes

attrs = Attributes()
attrs.insert("href", "/about")
attrs.insert("hidden", None)
attrs.insert("class", "a b")

len(attrs)                       # 3
attrs.is_class_member("b")       # True
attrs.get("href").as_utf8_str()  # "/about"
attrs.contains("hidden")         # True (attrs.get("hidden") is None)
list(attrs.items())              # [("href", "/about"), ("hidden", None), ("class", "a b")]
```

The removal methods behave as follows:

- `remove(key)` deletes an attribute and returns its old value.
- `remove_value(key)` clears the value but keeps the attribute. For `id` and `class`, which cannot exist without a value, it removes the whole attribute.

Other accessors:

- `id()`
- `class_name()`
- `class_iter()`
- `unstable_raw()`, which returns the map of the other attributes

`get` returns the stored `Bytes` object, so `attrs.get("href").set("/")` changes the value in place.

## Query selectors: `vdomhtml.query` and `vdomhtml.selector`

`parse_query_selector(text)` parses selector text into a `Selector` tree. It returns `None` if the text is not a valid selector. `SelectorParser(text).selector()` does the same.

Supported selectors are:

- Tag names, `#id`, `.class` and `*`
- Attribute selectors: `[attr]`, `[attr=value]`, `[attr~=value]`, `[attr^=value]`, `[attr$=value]` and `[attr*=value]`. Values may be quoted.
- `,` (or)
- `>` (parent)
- A space (descendant)
- Compound selectors such as `div.z` (and)

```python
from vdomhtml.query import parse_query_selector
from vdomhtml.selector import SelectorKind

sel = parse_query_selector("div#test")
sel.kind is SelectorKind.AND     # True
sel.left.name, sel.right.name    # (b"div", b"test")
```

`Selector.matches(node)` tests a single node. The node must provide `as_tag()`, which returns `None` for non-elements or an element object. That object has two methods:

- `name()`, which returns the tag name
- `attributes()`, which returns an `Attributes`

Descendant and parent combinators depend on a node's surroundings, so `matches` never reports them as matching.

```python
from vdomhtml.attributes import Attributes
from vdomhtml.bytes import Bytes
from vdomhtml.query import parse_query_selector

class Element:
    def __init__(self, name, attributes):
        self._name, self._attributes = Bytes(name), attributes
    def as_tag(self):
        return self
    def name(self):
        return self._name
    def attributes(self):
        return self._attributes

attrs = Attributes()
attrs.insert("property", "og:title")
meta = Element("meta", attrs)

parse_query_selector('meta[property="og:title"]').matches(meta)   # True
```

`QuerySelectorIterator(selector, parser, collection)` yields the handles of matching nodes in a collection. The collection must provide two methods:

- `query_len(parser)`
- `query_get(parser, index)`, which returns a `(node, handle)` pair or `None`

The number of nodes is read once, when the iterator is created. `copy()` returns an iterator that continues from the same position.

## Errors: `vdomhtml.errors`

Both exceptions are subclasses of `ValueError`:

- `SetBytesError` is raised by `Bytes.set`.
- `ParseError` is provided for code that parses documents. No module in this package raises it.

## What this package does not do

The package does not turn an HTML document into a tree of nodes. It has none of the following:

- A document parser
- A node or element type
- A document object, so no lookup by id or class and no `outer_html` or `inner_text`
- A command-line tool

To match selectors against a document, supply your own element objects and collections in the shapes described above.