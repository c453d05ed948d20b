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

from netshape.layers import Layer, Conv2d, TransposeConv2d, MaxPool2d, \
	ShapeError, LayerConstructionError

###############################################################################
def expected_conv_size(size, kernel, stride, padding):
	return (size + 2 * padding - kernel) // stride + 1

###############################################################################
class TestConv2d:
	""" Tests for the Conv2d layer.
	"""

	###########################################################################
	def test_same_padding(self):
		layer = Conv2d(kernel_size=3, stride=1, padding=1)
		assert layer.forward([1, 3, 32, 32]) == (1, 3, 32, 32)

	###########################################################################
	def test_strided(self):
		layer = Conv2d(kernel_size=3, stride=2)
		assert layer.forward((2, 16, 7, 9)) == (2, 16, 3, 4)

	###########################################################################
	def test_defaults(self):
		""" Stride defaults to 1 and padding to 0.
		"""
		layer = Layer.create_layer('conv2d', {'kernel_size' : 3})
		assert layer.stride == (1, 1)
		assert layer.padding == (0, 0)
		assert layer.forward((1, 1, 5, 5)) == (1, 1, 3, 3)

	###########################################################################
	def test_null_stride(self):
		layer = Layer.create_layer('conv2d',
			{'kernel_size' : 3, 'stride' : None, 'padding' : None})
		assert layer.stride == (1, 1)
		assert layer.padding == (0, 0)

	###########################################################################
	def test_rectangular(self):
		layer = Conv2d(kernel_size=[3, 5], padding=[1, 2])
		assert layer.forward((1, 1, 10, 10)) == (1, 1, 10, 10)

	###########################################################################
	def test_kernel_too_large(self):
		layer = Conv2d(kernel_size=5)
		with pytest.raises(ShapeError) as excinfo:
			layer.forward((1, 3, 4, 4))
		assert 'Invalid output dimensions 0x0' in str(excinfo.value)
		assert '[5, 5]' in str(excinfo.value)

	###########################################################################
	def test_negative_quotient_floors(self):
		""" (1 - 4) / 2 + 1 floors to -1, not 0 or 1.
		"""
		layer = Conv2d(kernel_size=4, stride=2)
		with pytest.raises(ShapeError):
			layer.forward((1, 1, 1, 8))

	###########################################################################
	@pytest.mark.parametrize('shape', [
		(1, 3, 32), (3, 32, 32, 1, 1), (), (10, )
	])
	def test_wrong_rank(self, shape):
		layer = Conv2d(kernel_size=3)
		with pytest.raises(ShapeError) as excinfo:
			layer.forward(shape)
		assert 'exactly 4 input dimensions' in str(excinfo.value)

	###########################################################################
	def test_channels(self):
		layer = Conv2d(kernel_size=3, padding=1, in_channels=3, out_channels=8)
		assert layer.forward((1, 3, 32, 32)) == (1, 8, 32, 32)
		with pytest.raises(ShapeError) as excinfo:
			layer.forward((1, 4, 32, 32))
		assert 'expects 3 input channels but got 4' in str(excinfo.value)

	###########################################################################
	@pytest.mark.parametrize('params', [
		{'kernel_size' : 0},
		{'kernel_size' : -3},
		{'kernel_size' : 2.5},
		{'kernel_size' : True},
		{'kernel_size' : 'three'},
		{'kernel_size' : [3]},
		{'kernel_size' : [3, 3, 3]},
		{'kernel_size' : 3, 'stride' : 0},
		{'kernel_size' : 3, 'padding' : -1},
		{'kernel_size' : 3, 'out_channels' : 0},
		{}
	])
	def test_bad_params(self, params):
		with pytest.raises(LayerConstructionError):
			Layer.create_layer('conv2d', params)

	###########################################################################
	def test_integral_floats(self):
		layer = Layer.create_layer('conv2d', {'kernel_size' : 3.0})
		assert layer.kernel_size == (3, 3)

	###########################################################################
	def test_formula_sweep(self, rng, sweep_size):
		""" The formula holds exactly, and the layer fails exactly when an
			output dimension would not be positive.
		"""
		for _ in range(sweep_size):
			kernel = int(rng.randint(1, 8))
			stride = int(rng.randint(1, 4))
			padding = int(rng.randint(0, 4))
			height = int(rng.randint(0, 20))
			width = int(rng.randint(0, 20))

			for cls in (Conv2d, MaxPool2d):
				layer = cls(kernel_size=kernel, stride=stride, padding=padding)
				out_h = expected_conv_size(height, kernel, stride, padding)
				out_w = expected_conv_size(width, kernel, stride, padding)
				if out_h > 0 and out_w > 0:
					assert layer.forward((2, 5, height, width)) == \
						(2, 5, out_h, out_w)
				else:
					with pytest.raises(ShapeError):
						layer.forward((2, 5, height, width))

###############################################################################
class TestTransposeConv2d:
	""" Tests for the TransposeConv2d layer.
	"""

	###########################################################################
	def test_upsample(self):
		layer = TransposeConv2d(kernel_size=4, stride=2, padding=1)
		assert layer.forward((1, 8, 16, 16)) == (1, 8, 32, 32)

	###########################################################################
	def test_from_params(self):
		layer = Layer.create_layer('transposeconv2d',
			{'kernel_size' : 2, 'stride' : 2, 'out_channels' : 3})
		assert layer.forward((4, 16, 8, 8)) == (4, 3, 16, 16)

	###########################################################################
	def test_empty_input(self):
		layer = TransposeConv2d(kernel_size=3)
		assert layer.forward((1, 1, 0, 0)) == (1, 1, 2, 2)

	###########################################################################
	def test_invalid_output(self):
		layer = TransposeConv2d(kernel_size=1, padding=1)
		with pytest.raises(ShapeError) as excinfo:
			layer.forward((1, 1, 1, 1))
		assert 'Invalid output dimensions -1x-1' in str(excinfo.value)

	###########################################################################
	def test_wrong_rank(self):
		with pytest.raises(ShapeError):
			TransposeConv2d(kernel_size=3).forward((1, 768))

	###########################################################################
	def test_missing_kernel(self):
		with pytest.raises(LayerConstructionError) as excinfo:
			Layer.create_layer('transposeconv2d', {'stride' : 2})
		assert '"kernel_size"' in str(excinfo.value)

	###########################################################################
	def test_formula_sweep(self, rng, sweep_size):
		for _ in range(sweep_size):
			kernel = int(rng.randint(1, 8))
			stride = int(rng.randint(1, 4))
			padding = int(rng.randint(0, 4))
			height = int(rng.randint(0, 20))
			width = int(rng.randint(0, 20))

			layer = TransposeConv2d(kernel_size=kernel, stride=stride,
				padding=padding)
			out_h = (height - 1) * stride - 2 * padding + kernel
			out_w = (width - 1) * stride - 2 * padding + kernel
			if out_h > 0 and out_w > 0:
				assert layer.forward((1, 2, height, width)) == \
					(1, 2, out_h, out_w)
			else:
				with pytest.raises(ShapeError):
					layer.forward((1, 2, height, width))

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
