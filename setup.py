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

###############################################################################
import sys

###############################################################################
def error_message(msg):
	""" Prints an error message and exits.
	"""
	line_width = 60
	format_spec = '{{: ^{width}}}'.format(width=line_width)
	lines = [
		'', '',
		'='*line_width, '',
		'ERROR', '',
		msg, '',
		'='*line_width, ''
	]
	for line in lines:
		print(format_spec.format(line), file=sys.stderr)
	sys.exit(1)

###############################################################################
if sys.version_info < (3, 6):
	error_message('netshape requires Python 3.6 or later.')

###############################################################################
# pylint: disable=wrong-import-position
import os
from setuptools import setup, find_packages
# pylint: enable=wrong-import-position

################################################################################
def readme():
	""" Return the README text.
	"""
	readme_rst = os.path.join(os.path.dirname(__file__), 'README.rst')
	with open(readme_rst, 'rb') as fh:
		result = fh.read()

	result = result.decode('utf-8')

	token = '.. package_readme_ends_here'
	mark = result.find(token)
	if mark >= 0:
		result = result[:mark]

	return result

################################################################################
def get_version():
	""" Gets the current version of the package.
	"""
	version_py = os.path.join(os.path.dirname(__file__), 'netshape',
		'version.py')
	with open(version_py, 'r') as fh:
		for line in fh:
			if line.startswith('__version__'):
				return line.split('=')[-1].strip().replace('"', '')
	raise ValueError('Failed to parse version from: {}'.format(version_py))

################################################################################
setup(
	# Package information
	name='netshape',
	version=get_version(),
	description='Static shape checking for neural networks',
	long_description=readme(),
	keywords='deep learning shape inference',
	classifiers=[
	],

	# What is packaged here.
	packages=find_packages(exclude=['tests', 'tests.*']),
	license='Apache Software License '
		'(http://www.apache.org/licenses/LICENSE-2.0)',

	# What to include.
	package_data={
		'': ['*.txt', '*.rst', '*.md']
	},

	# Dependencies
	python_requires='>=3.6',
	install_requires=[
		'pyyaml>=3.12',
		'jinja2>=2.8'
	],

	# Testing
	test_suite='tests',
	extras_require={
		'test' : [
			'pytest',
			'numpy>=1.11.2'
		]
	},

	entry_points={
		'console_scripts' : ['netshape=netshape.__main__:main']
	},

	zip_safe=False
)

#### EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF.EOF
