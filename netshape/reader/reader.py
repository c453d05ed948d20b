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

from ..utils import get_subclasses

logger = logging.getLogger(__name__)

###############################################################################
class Reader:
	""" Base class for all readers.

		Readers are responsible for turning the text of a network description
		into native Python objects. For example, you might have a JSON
		reader, a YAML reader, etc.
	"""

	###########################################################################
	@classmethod
	def get_name(cls):
		""" Returns the name of the reader.

			# Return value

			A lower-case string unique to this reader.
		"""
		return cls.__name__.lower()

	###########################################################################
	@staticmethod
	def get_all_readers():
		""" Returns all Reader subclasses.
		"""
		for cls in get_subclasses(Reader):
			yield cls

	###########################################################################
	@staticmethod
	def get_reader_by_name(name):
		""" Finds a reader class with the given name.
		"""
		name = name.lower()
		for cls in Reader.get_all_readers():
			if cls.get_name() == name:
				return cls
		raise ValueError('No such reader with name "{}"'.format(name))

	###########################################################################
	@classmethod
	def supported_filetypes(cls):
		""" Returns a list of supported file extensions.

			# Return value

			A tuple of lowercase extensions (without the period) that
			indicate that the Reader subclass can handle the implied file
			type.
		"""
		raise NotImplementedError

	###########################################################################
	@staticmethod
	def get_reader_for_file(filename):
		""" Returns the first Reader that claims to be able to read the given
			file.

			# Arguments

			filename: str. The filename to find a Reader for.

			# Return value

			A class that can read the given filename. If no such class can be
			found, a ValueError is raised.
		"""
		_, ext = os.path.splitext(filename)
		ext = ext.lower()
		if ext.startswith('.'):
			ext = ext[1:]
		for cls in Reader.get_all_readers():
			if ext in cls.supported_filetypes():
				return cls
		raise ValueError(
			'No such reader could be found for file: {}'.format(filename))

	###########################################################################
	@staticmethod
	def read_file(filename, name=None, default=None):
		""" Convenience function for reading data from a file.

			# Arguments

			filename: str. The file to read.
			name: str or None. The name of the reader to use. If None, the
				reader is chosen by file extension.
			default: str or None. The name of the reader to fall back to when
				the extension is not recognized. If None, an unrecognized
				extension is an error.

			# Exceptions

			A ValueError is raised if no reader can be found or if the file
			cannot be decoded.
		"""
		if name is not None:
			cls = Reader.get_reader_by_name(name)
		else:
			try:
				cls = Reader.get_reader_for_file(filename)
			except ValueError:
				if default is None:
					raise
				logger.debug('Unrecognized extension for %s; assuming %s.',
					filename, default)
				cls = Reader.get_reader_by_name(default)

		reader = cls()
		logger.debug('Reading %s with the %s reader.', filename,
			reader.get_name())
		with open(filename) as fh:
			return reader.read(fh.read())

	###########################################################################
	def read(self, data):
		""" Reads the data and returns native Python objects.

			# Arguments

			data: str. The data string to parse.

			# Return value

			A Python dictionary or list representing the data.

			# Exceptions

			Syntax errors are raised as ValueError.
		"""
		raise NotImplementedError

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
