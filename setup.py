#! /usr/bin/env python3

from setuptools import setup

setup(name='smalldoku',
      version='0.1.0',
      description='Generate, play, and check 9x9 sudoku puzzles',
      author='Joseph Tibbertsma',
      author_email='josephtibbertsma@gmail.com',
      packages=['smalldoku'],
      python_requires='>=3.8',
      install_requires=['gmpy2'],
      extras_require={'test': ['pytest']},
      entry_points={'console_scripts': ['smalldoku = smalldoku.__main__:main']})
