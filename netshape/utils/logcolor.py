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

import logging

# The eight standard terminal colors.
BLACK, RED, GREEN, YELLOW, BLUE, MAGENTA, CYAN, WHITE = range(8)

# ANSI escape sequences.
RESET_SEQ = '\033[0m'
COLOR_SEQ = '\033[1;{}m'
BOLD_SEQ = '\033[1m'

# Color for each log-level name. Unlisted levels are printed in white.
COLORS = {
	'TRACE' : CYAN,
	'DEBUG' : BLUE,
	'INFO' : WHITE,
	'WARNING' : YELLOW,
	'ERROR' : RED,
	'CRITICAL' : RED
}

###############################################################################
def basicConfig(**kwargs):                      # pylint: disable=invalid-name
	""" Configures the root logger like `logging.basicConfig()`, but with a
		ColorFormatter.

		Does nothing if the root logger already has handlers.

		# Arguments

		level: int (optional). The root log-level.
		format: str (optional). The record format. `$COLOR`, `$BOLD` and
			`$RESET` mark where colors start and stop.
		datefmt, style: as for `logging.Formatter`.
		stream: file-like (optional; default: stderr). Where to write.
	"""
	logger = logging.getLogger()
	if logger.hasHandlers():
		return

	formatter_args = {
		k : kwargs[k] for k in ('datefmt', 'style') if k in kwargs
	}
	if 'format' in kwargs:
		formatter_args['fmt'] = kwargs['format']

	handler = logging.StreamHandler(stream=kwargs.get('stream'))
	handler.setFormatter(ColorFormatter(**formatter_args))
	logger.addHandler(handler)

	if 'level' in kwargs:
		logger.setLevel(kwargs['level'])

###############################################################################
class ColorFormatter(logging.Formatter):
	""" A formatter which colors each record according to its log-level.

		# Usage

		```python
		from netshape.utils import logcolor

		logcolor.basicConfig(
			level=logging.INFO,
			format='$COLOR[%(levelname)s %(name)s]$RESET %(message)s'
		)
		```
	"""

	###########################################################################
	def format(self, record):
		""" Formats the log record using colors.
		"""
		message = super().format(record)
		color = COLOR_SEQ.format(30 + COLORS.get(record.levelname, WHITE))
		message = message.replace('$RESET', RESET_SEQ) \
			.replace('$BOLD', BOLD_SEQ).replace('$COLOR', color)
		return message + RESET_SEQ

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
