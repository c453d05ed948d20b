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

import pytest

from netshape import forward, summarize, ForwardStep
from netshape.layers import Layer

###############################################################################
class ExplodingLayer:                   # pylint: disable=too-few-public-methods
	""" Something that is not a proper layer and fails when used.
	"""

	###########################################################################
	def forward(self, input_shape):
		raise RuntimeError('boom')

	###########################################################################
	def __str__(self):
		return 'exploding'

###############################################################################
@pytest.fixture
def failing_layers():
	""" Layers for a (1, 3, 4, 4) input where the first one breaks.
	"""
	return [
		Layer.create_layer('conv2d', {'kernel_size' : 5}),
		Layer.create_layer('flatten'),
		Layer.create_layer('linear')
	]

###############################################################################
class TestForward:
	""" Tests for the forward simulator in its default mode, where every
		layer sees the declared input shape.
	"""

	###########################################################################
	def test_same_input_everywhere(self, cnn_layers):
		steps = forward(cnn_layers, [1, 3, 32, 32])

		assert len(steps) == len(cnn_layers)
		assert all(isinstance(step, ForwardStep) for step in steps)
		for step, layer in zip(steps, cnn_layers):
			assert step.layer is layer
			assert step.input_shape == (1, 3, 32, 32)

		assert [step.output_shape for step in steps[:4]] == [
			(1, 3, 32, 32),
			(1, 3, 32, 32),
			(1, 3, 16, 16),
			(1, 3072)
		]
		assert all(step.success for step in steps[:4])
		assert all(step.error is None for step in steps[:4])

		# Linear sees the 4D input, not the flattened output.
		assert not steps[4].success
		assert steps[4].output_shape is None
		assert 'exactly 2 input dimensions' in steps[4].error

	###########################################################################
	def test_failure_is_isolated(self, failing_layers):
		steps = forward(failing_layers, (1, 3, 4, 4))

		assert len(steps) == 3
		assert not steps[0].success
		assert 'Invalid output dimensions' in steps[0].error
		assert steps[0].output_shape is None

		assert steps[1].success
		assert steps[1].input_shape == (1, 3, 4, 4)
		assert steps[1].output_shape == (1, 48)

		assert not steps[2].success

	###########################################################################
	def test_never_raises(self):
		layers = [
			ExplodingLayer(),
			object(),
			Layer.create_layer('relu')
		]
		steps = forward(layers, (1, 2))
		assert len(steps) == 3
		assert steps[0].error == 'boom'
		assert not steps[1].success
		assert steps[1].error
		assert steps[2].success

	###########################################################################
	@pytest.mark.parametrize('shape', [None, 'abc', 7, (1, -1), ()])
	def test_bad_input_shape(self, cnn_layers, shape):
		steps = forward(cnn_layers, shape)
		assert len(steps) == len(cnn_layers)
		for step in steps:
			assert step.success == (step.output_shape is not None)
			assert step.success == (step.error is None)

	###########################################################################
	def test_empty(self):
		assert forward([], (1, 2)) == []

	###########################################################################
	def test_accepts_generators(self, cnn_layers):
		steps = forward((layer for layer in cnn_layers), (1, 3, 32, 32))
		assert len(steps) == len(cnn_layers)

	###########################################################################
	def test_repeatable(self, cnn_layers, failing_layers):
		layers = cnn_layers + failing_layers
		assert forward(layers, (1, 3, 4, 4)) == forward(layers, (1, 3, 4, 4))

	###########################################################################
	def test_random_pipelines(self, rng, sweep_size):
		""" Whatever the layers and the input, there is one record per layer.
		"""
		candidates = [
			('conv2d', {'kernel_size' : 3}),
			('conv2d', {'kernel_size' : 9, 'stride' : 2}),
			('transposeconv2d', {'kernel_size' : 1, 'padding' : 2}),
			('maxpool2d', {'kernel_size' : 2}),
			('flatten', {}),
			('unflatten', {'shape' : [3, 4]}),
			('reshape', {'shape' : [2, 6]}),
			('dropout', {'p' : 0.1}),
			('batchnorm2d', {'num_features' : 3}),
			('linear', {}),
			('sigmoid', {})
		]
		for _ in range(sweep_size):
			picks = rng.randint(0, len(candidates), size=rng.randint(0, 8))
			layers = [
				Layer.create_layer(*candidates[i]) for i in picks
			]
			shape = [int(x) for x in rng.randint(0, 6,
				size=rng.randint(0, 6))]
			for chain in (False, True):
				steps = forward(layers, shape, chain=chain)
				assert len(steps) == len(layers)
				for step, layer in zip(steps, layers):
					assert step.layer is layer
					assert step.success == (step.error is None)

###############################################################################
class TestChainedForward:
	""" Tests for the chained mode, where each layer sees the previous
		layer's output.
	"""

	###########################################################################
	def test_cnn(self, cnn_layers):
		steps = forward(cnn_layers, (1, 3, 32, 32), chain=True)
		assert all(step.success for step in steps)
		assert [step.input_shape for step in steps] == [
			(1, 3, 32, 32),
			(1, 3, 32, 32),
			(1, 3, 32, 32),
			(1, 3, 16, 16),
			(1, 768)
		]
		assert [step.output_shape for step in steps] == [
			(1, 3, 32, 32),
			(1, 3, 32, 32),
			(1, 3, 16, 16),
			(1, 768),
			(1, 768)
		]

	###########################################################################
	def test_failure_stops_the_chain(self, failing_layers):
		steps = forward(failing_layers, (1, 3, 4, 4), chain=True)
		assert len(steps) == 3
		assert not steps[0].success
		for step in steps[1:]:
			assert not step.success
			assert step.input_shape is None
			assert 'layer #0 (conv2d) failed' in step.error

###############################################################################
class TestSummarize:
	""" Tests for the text rendering of forward steps.
	"""

	###########################################################################
	def test_lines(self, failing_layers):
		lines = summarize(forward(failing_layers, (1, 3, 4, 4)))
		assert len(lines) == 3
		assert lines[0].startswith(
			'[1, 3, 4, 4] -> conv2d -> ERROR: Invalid output dimensions')
		assert lines[1] == '[1, 3, 4, 4] -> flatten -> [1, 48]'

	###########################################################################
	def test_chained_failure(self, failing_layers):
		lines = summarize(forward(failing_layers, (1, 3, 4, 4), chain=True))
		assert lines[2].startswith('? -> linear -> ERROR: Not evaluated')

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
