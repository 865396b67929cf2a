# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from setuptools import find_packages, setup


setup(
  name='uninames',
  version='0.0.1',
  description='Unicode names, aliases, labels and sequence names for code points and code point sequences.',

  python_requires='>=3.10',
  packages=find_packages(include=['uninames', 'uninames.*']),
  package_data={'uninames': ['data/*.json']},
  py_modules=['utest'],
  entry_points={'console_scripts': ['uninames=uninames.bin.uninames:main']},
)
