"""
Setup file for gumball
"""

from setuptools import setup, find_packages

setup(
    name='gumball',
    version='0.1.0',
    description="""
    A gumball machine built as a four-state finite-state machine.
    """.strip(),
    packages=find_packages(exclude=['benchmark']),
    package_dir={'gumball': 'gumball'},
    python_requires='>=3.8',
    install_requires=[
        "attrs>=22.2.0",
    ],
    extras_require={
        "visualize": ["graphviz>0.5.1"],
        "test": ["pytest", "graphviz>0.5.1"],
        "benchmark": ["pytest-benchmark"],
    },
    entry_points={
        "console_scripts": [
            "gumball-demo = gumball._demo:tool",
            "gumball-visualize = gumball._visualize:tool",
        ],
    },
    include_package_data=True,
    license="MIT",
    keywords='fsm finite state machine gumball vending',
    classifiers=[
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
