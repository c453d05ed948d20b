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

import sys
import json
import argparse
import logging

import yaml

from . import __version__
from .utils import logcolor, parse_shape
from . import Netfile, ParsingError, forward, summarize
from .engine import JinjaEngine

logger = logging.getLogger(__name__)

###############################################################################
def parse_netfile(filename, engine):
	""" Loads a network description from disk.

		# Arguments

		filename: str. The path to the description to load.
		engine: Engine instance. The templating engine to use.

		# Return value

		Netfile instance
	"""
	return Netfile(filename, engine)

###############################################################################
def check(args):
	""" Compiles a description and prints the shape after every layer.
	"""
	spec = parse_netfile(args.netfile, args.engine)
	layers = spec.build(args.variables)
	steps = forward(layers, args.shape, chain=args.chain)
	for index, line in enumerate(summarize(steps)):
		print('{:>3}: {}'.format(index, line))

	failures = sum(1 for step in steps if not step.success)
	if failures:
		logger.warning('%d of %d layers failed.', failures, len(steps))
		return 1
	logger.info('All %d layers succeeded.', len(steps))
	return 0

###############################################################################
def show_layers(args):
	""" Compiles a description and prints each layer.
	"""
	spec = parse_netfile(args.netfile, args.engine)
	for index, layer in enumerate(spec.build(args.variables)):
		print('{:>3}: {!r}'.format(index, layer))

###############################################################################
def dump(args):
	""" Dumps the parsed layer entries to stdout as a JSON blob.
	"""
	spec = parse_netfile(args.netfile, args.engine)
	print(json.dumps(
		[entry._asdict() for entry in spec.parse(args.variables)],
		sort_keys=False, indent=4
	))

###############################################################################
def version(args):                          # pylint: disable=unused-argument
	""" Prints the version and exits.
	"""
	print('netshape -- static shape checking for neural networks')
	print('Version: {}'.format(__version__))

###############################################################################
def parse_variable(text):
	""" Parses a NAME=VALUE template variable from the command line.

		The value is decoded as YAML, so `k=3` gives an integer and `k=[2, 2]`
		gives a list.
	"""
	if '=' not in text:
		raise argparse.ArgumentTypeError('Variables must look like '
			'NAME=VALUE, but received: {}'.format(text))
	name, value = text.split('=', 1)
	try:
		value = yaml.safe_load(value)
	except yaml.YAMLError:
		pass
	return (name.strip(), value)

###############################################################################
def shape_argument(text):
	""" argparse type for comma-separated shapes.
	"""
	try:
		return parse_shape(text)
	except ValueError as exc:
		raise argparse.ArgumentTypeError(str(exc))

###############################################################################
def add_variable_argument(subparser):
	""" Adds the repeatable --var option to a sub-command.
	"""
	subparser.add_argument('--var', dest='variables', action='append',
		type=parse_variable, default=[], metavar='NAME=VALUE',
		help='Template variable available to the description. Can be '
			'specified more than once.')

###############################################################################
def parse_args(argv=None):
	""" Constructs an argument parser and returns the parsed arguments.
	"""
	parser = argparse.ArgumentParser(
		prog='netshape',
		description='Static shape checking for neural networks')
	parser.add_argument('--no-color', action='store_true',
		help='Disable colorful logging.')
	parser.add_argument('-v', '--verbose', default=0, action='count',
		help='Increase verbosity. Can be specified twice for debug-level '
			'output.')
	parser.add_argument('--version', action='store_true',
		help='Display version and exit.')

	subparsers = parser.add_subparsers(dest='cmd', help='Sub-command help.')

	subparser = subparsers.add_parser('check',
		help='Prints the shape produced by every layer.')
	subparser.add_argument('netfile', help='The network description to use.')
	subparser.add_argument('-s', '--shape', required=True,
		type=shape_argument,
		help='The input shape, as comma-separated integers (e.g., 1,3,32,32).')
	subparser.add_argument('--chain', action='store_true',
		help='Feed each layer the output of the previous layer, instead of '
			'the input shape.')
	add_variable_argument(subparser)
	subparser.set_defaults(func=check)

	subparser = subparsers.add_parser('layers',
		help='Prints the layers of a description.')
	subparser.add_argument('netfile', help='The network description to use.')
	add_variable_argument(subparser)
	subparser.set_defaults(func=show_layers)

	subparser = subparsers.add_parser('dump',
		help='Dumps the parsed layer entries as a JSON blob. Useful for '
			'debugging.')
	subparser.add_argument('netfile', help='The network description to use.')
	add_variable_argument(subparser)
	subparser.set_defaults(func=dump)

	return parser.parse_args(argv)

###############################################################################
def main(argv=None):
	""" Entry point for the netshape command-line script.
	"""
	args = parse_args(argv)

	loglevel = {
		0 : logging.WARNING,
		1 : logging.INFO,
		2 : logging.DEBUG
	}
	config = logging.basicConfig if args.no_color else logcolor.basicConfig
	config(
		level=loglevel.get(args.verbose, logging.TRACE),
		format='{color}[%(levelname)s %(asctime)s %(name)s:%(lineno)s]{reset} '
			'%(message)s'.format(
				color='' if args.no_color else '$COLOR',
				reset='' if args.no_color else '$RESET'
			)
	)
	logging.captureWarnings(True)

	if args.version:
		args.func = version
	elif not hasattr(args, 'func'):
		print('Nothing to do!', file=sys.stderr)
		print('For usage information, try: netshape --help', file=sys.stderr)
		sys.exit(1)

	args.engine = JinjaEngine()
	args.variables = dict(getattr(args, 'variables', None) or [])

	try:
		result = args.func(args)
	except (ParsingError, IOError) as exc:
		logger.error('%s', exc)
		result = 1

	sys.exit(result or 0)

###############################################################################
if __name__ == '__main__':
	main()

### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
