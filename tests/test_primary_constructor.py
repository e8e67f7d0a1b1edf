from modexport import CLIENT_BUCKET, TEST_BUCKET


def test_class_and_functions_exported_together(exporter):
    class MyClass:
        pass

    def some_function():
        pass

    def some_other_function():
        pass

    def some_function_with_diff_name():
        pass

    exporter.register_public(some_function)
    exporter.register_private(some_other_function)
    exporter.set_primary_constructor(MyClass)
    exporter.register_public(some_function_with_diff_name, "diff_name")
    exp = exporter.assemble()

    assert exp is MyClass
    assert callable(exp)
    assert callable(exp.some_function)
    assert callable(getattr(exp, TEST_BUCKET)["some_other_function"])
    assert callable(exp.diff_name)


def test_instances_keep_members_set_by_constructor(exporter):
    class Widget:
        def __init__(self):
            self.spin = lambda a, b: a + b

    def helper():
        return "help"

    exporter.set_primary_constructor(Widget)
    exporter.register_public(helper)
    exported = exporter.assemble()

    assert exported is Widget
    assert exported.helper is helper
    assert exported.helper() == "help"
    assert exported().spin(2, 2) == 4
    assert getattr(exported, CLIENT_BUCKET) == {}


def test_plain_function_as_primary_constructor(exporter):
    def make_widget():
        return {"kind": "widget"}

    def helper():
        pass

    exporter.set_primary_constructor(make_widget)
    exporter.register_public(helper)
    exp = exporter.assemble()

    assert exp is make_widget
    assert exp() == {"kind": "widget"}
    assert exp.helper is helper


def test_last_primary_constructor_wins(exporter):
    class First:
        pass

    class Second:
        pass

    exporter.set_primary_constructor(First)
    exporter.set_primary_constructor(Second)

    assert exporter.assemble() is Second


def test_anonymous_primary_constructor_keeps_previous(exporter):
    class Kept:
        pass

    exporter.set_primary_constructor(Kept)
    exporter.set_primary_constructor(lambda: None)

    assert exporter.primary_constructor is Kept
    assert exporter.assemble() is Kept


def test_non_callable_primary_constructor_is_ignored(exporter):
    exporter.set_primary_constructor("Widget")

    assert exporter.primary_constructor is None


def test_primary_decorator_and_aliases(exporter):
    @exporter.primary
    class Service:
        def __init__(self, port):
            self.port = port

    @exporter.register_client
    def connect():
        pass

    exp = exporter.get_exports()
    assert exp is Service
    assert exp(8080).port == 8080
    assert getattr(exp, CLIENT_BUCKET) == {"connect": connect}
    assert exp.connect is connect

    class Replacement:
        pass

    exporter.set_class(Replacement)
    assert exporter.assemble() is Replacement
