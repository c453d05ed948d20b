"""
Copyright 2017 Deepgram

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import numpy
import pytest

from netshape.utils import get_subclasses
from netshape.engine import Engine, JinjaEngine, PassthroughEngine
from netshape.layers import Layer

###############################################################################
def pytest_addoption(parser):
	parser.addoption('--sweep-size', type=int, default=200,
		help='Number of random cases in the shape-arithmetic sweeps.')

###############################################################################
@pytest.fixture
def sweep_size(request):
	""" Number of random cases to draw in property sweeps.
	"""
	return request.config.getoption('--sweep-size')

###############################################################################
@pytest.fixture
def rng():
	""" A seeded random number generator, so sweeps are reproducible.
	"""
	return numpy.random.RandomState(1234)

###############################################################################
@pytest.fixture(
	params=get_subclasses(Engine, recursive=True)
)
def an_engine(request):
	""" Fixture for obtaining an engine.
	"""
	return request.param()

###############################################################################
@pytest.fixture
def passthrough_engine():
	""" Returns a passthrough engine.
	"""
	return PassthroughEngine()

###############################################################################
@pytest.fixture
def jinja_engine():
	""" Returns a Jinja2 engine.
	"""
	return JinjaEngine()

###############################################################################
@pytest.fixture(
	params=Layer.get_layer_names()
)
def a_layer_name(request):
	""" Every layer type name, one at a time.
	"""
	return request.param

###############################################################################
@pytest.fixture(
	params=['relu', 'tanh', 'leakyrelu', 'sigmoid']
)
def an_activation(request):
	""" Each activation layer.
	"""
	return Layer.create_layer(request.param)

###############################################################################
@pytest.fixture
def cnn_document():
	""" A small convolutional network, written in YAML.
	"""
	return '\n'.join([
		'layers:',
		'  - type: conv2d',
		'    params:',
		'      kernel_size: 3',
		'      stride: 1',
		'      padding: 1',
		'  - type: relu',
		'  - type: maxpool2d',
		'    params:',
		'      kernel_size: 2',
		'      stride: 2',
		'      padding: 0',
		'  - type: flatten',
		'  - type: linear'
	]) + '\n'

###############################################################################
@pytest.fixture
def cnn_layers():
	""" The layers described by `cnn_document()`.
	"""
	return [
		Layer.create_layer('conv2d',
			{'kernel_size' : 3, 'stride' : 1, 'padding' : 1}),
		Layer.create_layer('relu'),
		Layer.create_layer('maxpool2d',
			{'kernel_size' : 2, 'stride' : 2, 'padding' : 0}),
		Layer.create_layer('flatten'),
		Layer.create_layer('linear')
	]

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
