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

from netshape.layers import Layer, Flatten, Unflatten, Reshape, ShapeError, \
	LayerConstructionError

###############################################################################
class TestFlatten:
	""" Tests for the Flatten layer.
	"""

	###########################################################################
	@pytest.mark.parametrize('shape,expected', [
		((1, 3, 16, 16), (1, 768)),
		((4, 10), (4, 10)),
		((2, 3, 4, 5, 6), (2, 360)),
		((2, 3, 0), (2, 0))
	])
	def test_flatten(self, shape, expected):
		assert Flatten().forward(shape) == expected

	###########################################################################
	@pytest.mark.parametrize('shape', [(5, ), ()])
	def test_too_few_dimensions(self, shape):
		with pytest.raises(ShapeError) as excinfo:
			Flatten().forward(shape)
		assert 'at least two' in str(excinfo.value)

###############################################################################
class TestUnflatten:
	""" Tests for the Unflatten layer.
	"""

	###########################################################################
	def test_unflatten(self):
		layer = Layer.create_layer('unflatten', {'shape' : [3, 16, 16]})
		assert layer.forward((1, 768)) == (1, 3, 16, 16)

	###########################################################################
	def test_alias(self):
		layer = Layer.create_layer('unflatten', {'target_shape' : [2, 5]})
		assert layer.shape == (2, 5)

	###########################################################################
	def test_size_mismatch(self):
		layer = Unflatten([3, 16, 16])
		with pytest.raises(ShapeError) as excinfo:
			layer.forward((1, 700))
		message = str(excinfo.value)
		assert '700' in message
		assert '768' in message

	###########################################################################
	def test_wrong_rank(self):
		with pytest.raises(ShapeError):
			Unflatten([3, 16, 16]).forward((1, 3, 16, 16))

	###########################################################################
	@pytest.mark.parametrize('params', [
		{}, {'shape' : []}, {'shape' : [3, 0]}, {'shape' : 12},
		{'shape' : [3, 'a']}
	])
	def test_bad_params(self, params):
		with pytest.raises(LayerConstructionError):
			Layer.create_layer('unflatten', params)

	###########################################################################
	@pytest.mark.parametrize('shape', [
		(1, 3, 16, 16), (8, 2, 3), (2, 5, 1, 7, 3)
	])
	def test_round_trip(self, shape):
		""" Unflatten undoes Flatten when the target is the trailing dims.
		"""
		flat = Flatten().forward(shape)
		assert Unflatten(shape[1:]).forward(flat) == shape

###############################################################################
class TestReshape:
	""" Tests for the Reshape layer.
	"""

	###########################################################################
	def test_reshape(self):
		layer = Layer.create_layer('reshape', {'shape' : [1, 768]})
		assert layer.forward((1, 3, 16, 16)) == (1, 768)

	###########################################################################
	def test_any_rank(self):
		layer = Reshape([2, 3, 4])
		assert layer.forward((24, )) == (2, 3, 4)
		assert layer.forward((4, 6)) == (2, 3, 4)

	###########################################################################
	def test_mismatch(self):
		layer = Reshape([1, 700])
		with pytest.raises(ShapeError) as excinfo:
			layer.forward((1, 3, 16, 16))
		message = str(excinfo.value)
		assert '768 elements' in message
		assert '700 elements' in message

	###########################################################################
	def test_sweep(self, rng, sweep_size):
		""" Reshape succeeds exactly when the element counts agree.
		"""
		for _ in range(sweep_size):
			shape = tuple(int(x) for x in rng.randint(1, 6,
				size=rng.randint(1, 5)))
			target = tuple(int(x) for x in rng.randint(1, 6,
				size=rng.randint(1, 5)))
			layer = Reshape(target)

			total = 1
			for x in shape:
				total *= x
			expected_total = 1
			for x in target:
				expected_total *= x

			if total == expected_total:
				assert layer.forward(shape) == target
			else:
				with pytest.raises(ShapeError):
					layer.forward(shape)

	###########################################################################
	def test_missing_shape(self):
		with pytest.raises(LayerConstructionError) as excinfo:
			Layer.create_layer('reshape', {})
		assert 'Missing required parameter "shape"' in str(excinfo.value)

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
