from vdomhtml.attributes import Attributes
from vdomhtml.bytes import Bytes


def test_insert_attribute_owned():
    attr = Attributes()
    style = Bytes()
    style.set("some style")
    attr.insert("style", style)
    assert attr.get("style") == "some style"
    assert attr.get("style").is_owned()


def test_remove_returns_value():
    attr = Attributes()
    attr.insert("contenteditable", "true")
    assert attr.remove("contenteditable") == "true"
    assert len(attr) == 0
    assert attr.is_empty()


def test_remove_value_keeps_attribute():
    attr = Attributes()
    attr.insert("contenteditable", "true")
    assert attr.remove_value("contenteditable") == "true"
    assert attr.get("contenteditable") is None
    assert attr.contains("contenteditable")
    assert list(attr.items()) == [("contenteditable", None)]
    assert attr.remove("contenteditable") is None
    assert not attr.contains("contenteditable")


def test_mutate_value_in_place():
    attr = Attributes()
    attr.insert("src", "test.png")
    attr.get("src").set("world.png")
    assert attr.get("src") == "world.png"


def test_id_and_class_stored_apart():
    attr = Attributes()
    attr.insert("id", "main")
    attr.insert("class", "a b")
    assert attr.id() == "main"
    assert attr.class_name() == "a b"
    assert len(attr.unstable_raw()) == 0
    assert len(attr) == 2
    assert attr.get(b"id") == "main"


def test_remove_value_of_id_removes_it():
    attr = Attributes()
    attr.insert("id", "x")
    assert attr.remove_value("id") == "x"
    assert not attr.contains("id")
    assert attr.id() is None


def test_items_order():
    attr = Attributes()
    attr.insert("class", "c")
    attr.insert("id", "i")
    attr.insert("href", "/about")
    attr.insert("hidden", None)
    assert list(attr.items()) == [
        ("href", "/about"),
        ("hidden", None),
        ("id", "i"),
        ("class", "c"),
    ]


def test_class_membership():
    attr = Attributes()
    attr.insert("class", "a  b\tc")
    assert list(attr.class_iter()) == ["a", "b", "c"]
    assert attr.is_class_member("b")
    assert attr.is_class_member(b"c")
    assert not attr.is_class_member("d")


def test_no_class():
    attr = Attributes()
    assert attr.class_iter() is None
    assert not attr.is_class_member("a")


def test_invalid_utf8_class():
    attr = Attributes()
    attr.insert("class", b"\xff\xfe")
    assert attr.class_iter() is None
    assert not attr.is_class_member(b"\xff\xfe")


def test_absent_attribute():
    attr = Attributes()
    assert attr.get("missing") is None
    assert not attr.contains("missing")
    assert "missing" not in attr
    assert attr.remove("missing") is None
    assert attr.remove_value("missing") is None
    assert not attr.contains("missing")


def test_raw_map_moves_to_heap():
    attr = Attributes()
    for name in ("a", "b"):
        attr.insert(name, name)
    assert not attr.unstable_raw().is_heap_allocated()
    attr.insert("c", "c")
    assert attr.unstable_raw().is_heap_allocated()
    assert len(attr) == 3
    assert attr.get("c") == "c"


def test_contains_valueless():
    attr = Attributes()
    attr.insert("allowfullscreen", None)
    assert attr.contains("allowfullscreen")
    assert attr.get("allowfullscreen") is None
    assert len(attr) == 1