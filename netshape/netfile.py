"""
Copyright 2016 Deepgram

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

import os
import logging
from collections import namedtuple

from .engine import ScopeStack, PassthroughEngine
from .reader import Reader
from .layers import Layer, ParsingError

logger = logging.getLogger(__name__)

# One entry of the "layers" list: the type name and its raw parameters.
LayerSpec = namedtuple('LayerSpec', ['type', 'params'])

###############################################################################
class ConfigFormatError(ParsingError):
	""" Raised when a network description is malformed or is missing one of
		its structural fields.
	"""

###############################################################################
def read_document(document, reader='yaml'):
	""" Decodes the text of a network description.

		# Arguments

		document: str or bytes. The document text.
		reader: str (default: 'yaml'). The name of the Reader to use.

		# Return value

		The decoded Python object.

		# Exceptions

		A ConfigFormatError is raised if the document cannot be decoded.
	"""
	if not isinstance(document, (str, bytes)):
		raise ConfigFormatError('Malformed document: expected text, but '
			'received: {}'.format(type(document).__name__))
	reader = Reader.get_reader_by_name(reader)()
	try:
		return reader.read(document)
	except ValueError as exc:
		raise ConfigFormatError('Malformed document: {}'.format(exc)) from exc

###############################################################################
class Netfile:
	""" Class for loading and parsing network descriptions.

		A network description is a mapping with a single interpreted key,
		`layers`, which is a list of layer entries:

		```
		layers:
		  - type: conv2d
			params:
			  kernel_size: 3
			  padding: 1
		  - type: relu
		  - type: flatten
		```
	"""

	###########################################################################
	def __init__(self, source, engine=None, reader=None):
		""" Creates a new Netfile.

			# Arguments

			source: str or dict. If it is a string, it is interpretted as a
				filename to an on-disk description. Otherwise, it is
				interpretted as an already-loaded, but unparsed, description.
			engine: Engine instance. The templating engine to use in parsing.
				If None, a Passthrough engine is instantiated.
			reader: str or None. The name of the reader to use for files. If
				None, it is chosen by file extension.

			# Exceptions

			If `source` names a file that does not exist, an IOError is
			raised. If the file cannot be decoded, a ConfigFormatError is
			raised.
		"""
		self.engine = engine or PassthroughEngine()
		if isinstance(source, str):
			filename = os.path.expanduser(os.path.expandvars(source))
			if not os.path.isfile(filename):
				raise IOError('No such file found: {}. Path was expanded to: '
					'{}.'.format(source, filename))
			self.filename = filename
			self.data = self.load(filename, reader)
		else:
			self.filename = None
			self.data = source

		self.specs = None
		self.layers = None

	###########################################################################
	@classmethod
	def from_string(cls, document, reader='yaml', engine=None):
		""" Creates a new Netfile from the text of a description.
		"""
		result = cls(None, engine=engine)
		result.data = read_document(document, reader)
		return result

	###########################################################################
	@staticmethod
	def load(filename, reader=None):
		""" Reads a description from disk.
		"""
		try:
			return Reader.read_file(filename, reader, default='yaml')
		except ValueError as exc:
			raise ConfigFormatError('Malformed document: {}'.format(exc)) \
				from exc

	###########################################################################
	def parse(self, variables=None):
		""" Parses the description into layer entries.

			# Arguments

			variables: dict or None. Variables made available to the
				templating engine while parameters are evaluated.

			# Return value

			A list of LayerSpec tuples, in order.

			# Exceptions

			A ConfigFormatError is raised if the `layers` list is missing, if
			an entry has no `type`, or if a template cannot be evaluated.
		"""
		logger.info('Parsing network description%s...',
			' from {}'.format(self.filename) if self.filename else '')

		if not isinstance(self.data, dict) or 'layers' not in self.data:
			raise ConfigFormatError('Missing required top-level field '
				'"layers". The document must be a mapping with a "layers" '
				'list, but received: {}'.format(self.data))

		entries = self.data['layers']
		if not isinstance(entries, (list, tuple)):
			raise ConfigFormatError('The top-level "layers" field must be a '
				'list of layer entries, but received: {}'.format(entries))

		with ScopeStack(self.engine, dict(variables or {})):
			specs = [
				self._parse_entry(index, entry)
				for index, entry in enumerate(entries)
			]

		logger.debug('Parsed %d layer entries.', len(specs))
		self.specs = specs
		return specs

	###########################################################################
	def _parse_entry(self, index, entry):
		""" Parses a single entry of the `layers` list.
		"""
		if not isinstance(entry, dict) or entry.get('type') in (None, ''):
			raise ConfigFormatError('Layer entry #{} is missing the required '
				'"type" field: {}'.format(index, entry))

		try:
			layer_type = self.engine.evaluate(entry['type'])
			params = self.engine.evaluate(entry.get('params'), recursive=True)
		except ValueError as exc:
			raise ConfigFormatError('Layer entry #{}: {}'.format(index, exc)) \
				from exc

		if not isinstance(layer_type, str):
			raise ConfigFormatError('The "type" field of layer entry #{} must '
				'be a string, but received: {}'.format(index, layer_type))
		if params is None:
			params = {}
		elif not isinstance(params, dict):
			raise ConfigFormatError('The "params" field of layer entry #{} '
				'({}) must be a mapping, but received: {}'.format(
					index, layer_type, params))

		for key in entry:
			if key not in ('type', 'params'):
				logger.warning('Ignoring unknown field "%s" in layer entry '
					'#%d.', key, index)

		return LayerSpec(layer_type, params)

	###########################################################################
	def build(self, variables=None):
		""" Parses the description and constructs every layer.

			# Arguments

			variables: dict or None. As for `parse()`.

			# Return value

			A list of Layer instances, in order.

			# Exceptions

			The first ConfigFormatError, UnknownLayerTypeError or
			LayerConstructionError encountered is raised, and no layers are
			returned. Construction errors are re-raised with the index of the
			offending entry in the message.
		"""
		specs = self.parse(variables)
		layers = []
		for index, spec in enumerate(specs):
			try:
				layers.append(Layer.create_layer(spec.type, spec.params))
			except ParsingError as exc:
				raise type(exc)('Layer entry #{} ({}): {}'.format(
					index, spec.type, exc)) from exc

		logger.info('Built %d layers: %s', len(layers),
			', '.join(str(layer) for layer in layers))
		self.layers = layers
		return layers

###############################################################################
def parse(document, reader='yaml', engine=None, variables=None):
	""" Parses the text of a network description into LayerSpec tuples.
	"""
	return Netfile.from_string(document, reader=reader, engine=engine) \
		.parse(variables)

###############################################################################
def parse_blocks(document, reader='yaml', engine=None, variables=None):
	""" Parses the text of a network description and constructs its layers.

		This composes `parse()` with `Layer.create_layer()`; see
		`Netfile.build()` for the error behavior.
	"""
	return Netfile.from_string(document, reader=reader, engine=engine) \
		.build(variables)

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
