import os.path
import re
import setuptools


def find_version(filename):
    with open(filename) as f:
        text = f.read()
    match = re.search(r"^_version_str = '(.*)'$", text, re.MULTILINE)
    if not match:
        raise RuntimeError('cannot find version')
    return match.group(1)


tld = os.path.abspath(os.path.dirname(__file__))
version = find_version(os.path.join(tld, 'scriptsim', '__init__.py'))


setuptools.setup(
    name='scriptsim',
    version=version,
    license='MIT',
    packages=['scriptsim'],
    python_requires='>=3.8',
    install_requires=['attrs', 'click'],
    extras_require={'test': ['pytest']},
    entry_points={
        'console_scripts': ['scriptsim=scriptsim.cli:main'],
    },
    long_description=(
        'Symbolic simulator for Bitcoin script: annotates each line of a script with the '
        'main and alt stacks after it executes.'
    ),
)
