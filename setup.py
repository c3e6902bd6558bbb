#!/usr/bin/env python3
# -*- coding: UTF-8 -*-

# Copyright (c) 2023-2026 Joel Owusu-Ansah
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program. If not, see <http://www.gnu.org/licenses/>.

from setuptools import find_packages, setup

VERSION = '1.0'

setup(
    name='fedup',
    version=VERSION,
    description='Upgrade your Fedora Workstation installation to the latest release',
    author='Joel Owusu-Ansah',
    license='GPLv3',
    python_requires='>=3.8',
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[
        'distro',
        'requests',
        'rich',
    ],
    extras_require={
        'test': [
            'pytest',
            'responses',
        ],
    },
    entry_points={
        'console_scripts': [
            'fedup = fedup.__main__:main',
        ],
    },
)
