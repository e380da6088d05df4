import numpy as np
import pytest

from sann import Neurons, Synapses, connect, inputs, linear
from sann.core.activations import relu


def test_inputs_are_fresh_linear_sources():
    a = inputs(3)
    b = inputs(3)
    assert a.cardinality == 3
    assert a.activator is linear
    assert a.inputs == ()
    assert a is not b
    assert a != b
    assert a.handle != b.handle


def test_connect_prepends_and_leaves_target_untouched():
    first = inputs(2)
    second = inputs(4)
    target = Neurons(3, relu, name="target")
    once = connect(first, target)
    twice = connect(second, once)

    assert target.inputs == ()
    assert [s.source for s in once.inputs] == [first]
    assert [s.source for s in twice.inputs] == [second, first]
    assert twice.cardinality == 3
    assert twice.activator is relu
    assert twice.name == "target"
    assert len({target.handle, once.handle, twice.handle}) == 3
    assert twice.input_size == 6


def test_rshift_is_connect():
    source = inputs(2)
    layer = source >> Neurons(1)
    assert isinstance(layer.inputs[0], Synapses)
    assert layer.inputs[0].source is source


def test_structurally_equal_neurons_hash_separately():
    a = Neurons(2)
    b = Neurons(2)
    assert len({a, b}) == 2


def test_cardinality_validation():
    Neurons(0)
    with pytest.raises(ValueError):
        Neurons(-1)
    with pytest.raises(TypeError):
        Neurons(2.5)


def test_numpy_integer_cardinality_is_accepted():
    neurons = Neurons(np.int64(4))
    assert neurons.cardinality == 4
    assert type(neurons.cardinality) is int
    with pytest.raises(TypeError):
        Neurons(True)
