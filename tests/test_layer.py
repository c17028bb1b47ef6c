from sampo.layer import Layer, LayerStack


def _layers(*names):
    return [Layer(name) for name in names]


def test_default_layer_name():
    assert Layer().name == "Unnamed Layer"
    assert Layer("Game").name == "Game"


def test_overlays_stay_after_layers():
    a, b, o = _layers("a", "b", "o")
    stack = LayerStack()
    stack.push_layer(a)
    stack.push_overlay(o)
    stack.push_layer(b)
    assert list(stack) == [a, b, o]
    assert len(stack) == 3


def test_reversed_order():
    a, b, o = _layers("a", "b", "o")
    stack = LayerStack()
    stack.push_layer(a)
    stack.push_layer(b)
    stack.push_overlay(o)
    assert list(reversed(stack)) == [o, b, a]


def test_pop_layer_moves_insertion_point():
    a, b, c, o = _layers("a", "b", "c", "o")
    stack = LayerStack()
    stack.push_layer(a)
    stack.push_layer(b)
    stack.push_overlay(o)
    stack.pop_layer(b)
    assert list(stack) == [a, o]
    stack.push_layer(c)
    assert list(stack) == [a, c, o]


def test_pop_overlay():
    a, o = _layers("a", "o")
    stack = LayerStack()
    stack.push_layer(a)
    stack.push_overlay(o)
    stack.pop_overlay(o)
    assert list(stack) == [a]


def test_pop_unknown_layer_is_ignored():
    a, stranger = _layers("a", "stranger")
    stack = LayerStack()
    stack.push_layer(a)
    stack.pop_layer(stranger)
    stack.pop_overlay(stranger)
    assert list(stack) == [a]


def test_pop_uses_identity():
    first, second = Layer("same"), Layer("same")
    stack = LayerStack()
    stack.push_layer(first)
    stack.push_layer(second)
    stack.pop_layer(second)
    assert len(stack) == 1
    assert next(iter(stack)) is first


def test_hooks_can_be_overridden():
    class Recording(Layer):
        def __init__(self):
            super().__init__("rec")
            self.updates = []

        def on_update(self, delta_time):
            self.updates.append(delta_time)

    layer = Recording()
    stack = LayerStack()
    stack.push_layer(layer)
    for item in stack:
        item.on_update(0.5)
    assert layer.updates == [0.5]