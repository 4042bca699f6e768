from setuptools import setup

with open("README.md", 'r') as f:
    long_description = f.read()

setup(
    name='naiveregex',
    version='0.1.0',
    description='Regular expression patterns and finite automata',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=['naiveregex', 'naiveregex.automata'],
    python_requires='>=3.9',
    install_requires=[
        'typing_extensions'
    ],
    extras_require={
        'test': [
            'compynator',
            'pytest',
        ]
    },
)
