"""gffact setup script.

Options:                python setup.py --help
Install by admin/root:  python setup.py install
Install by user:        python setup.py install --user
Install options:        python setup.py install --help
"""

from setuptools import setup
import gffact

with open('README.md', 'r') as f:
    LONG_DESCRIPTION = f.read()

setup(
    name='gffact',
    version=gffact.__version__,
    description='gffact -- Factorization of polynomials over finite fields in Python',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    keywords=['finite fields', 'Galois fields', 'polynomials', 'factorization',
              'Cantor-Zassenhaus', 'square-free factorization',
              'distinct-degree factorization', 'binary polynomials'],
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Intended Audience :: Education',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Scientific/Engineering :: Mathematics',
        'Topic :: Software Development :: Libraries :: Python Modules'
    ],
    license=gffact.__license__,
    packages=['gffact'],
    platforms=['any'],
    install_requires=['gmpy2'],
    python_requires='>=3.9'
)
