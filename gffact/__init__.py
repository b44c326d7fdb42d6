"""gffact is a Python package for factoring univariate polynomials over finite fields.

Prime fields GF(p) are available via gffact.finfields.GF(p), providing field
elements with the operators +,-,*,/ and ** overloaded.

Polynomials over GF(p) are available via gffact.gfpx.GFpX(p). Binary polynomials
(over GF(2)) come in two interchangeable representations: a dense bit vector of
fixed capacity, suited for high-degree polynomials of large weight, and a sparse
list of exponents, suited for polynomials of low weight. Polynomials over odd prime
fields are represented as coefficient lists. All representations support the same
ring operations, including division with remainder and GCDs, plus the structural
operations used for factorization (derivative, power and unpower maps).

Module gffact.factor provides square-free factorization, distinct-degree
factorization and three strategies for equal-degree splitting: Cantor-Zassenhaus
(randomized), a deterministic trace-based method, and a period-finding method.
Function factorize() combines these to produce complete factorizations.
"""

__version__ = '0.3.1'
__license__ = 'MIT License'

import os
import sys
import argparse
import logging


def get_arg_parser():
    """Return parser for command line arguments recognized by gffact."""
    parser = argparse.ArgumentParser(add_help=False)

    group = parser.add_argument_group('gffact parameters')
    group.add_argument('--max-attempts', type=int, metavar='n',
                       help='default number of random trials for Cantor-Zassenhaus splitting')
    group.add_argument('--capacity', type=int, metavar='c',
                       help='default capacity c (max degree c-1) of dense binary polynomials')

    group = parser.add_argument_group('gffact logging')
    group.add_argument('--log-level', type=str, metavar='ll',
                       help='logging level ll=debug/info(default)/warning/error')
    group.add_argument('--no-log', action='store_true',
                       help='disable logging messages')

    parser.set_defaults(max_attempts=100, capacity=1024, log_level='info')
    return parser


options = get_arg_parser().parse_known_args()[0]

# Set logging level as early as possible.
if options.no_log:
    logging.basicConfig(level=logging.WARNING)
else:
    ch = options.log_level[0].upper()
    ch = {'N': '0', 'D': '1', 'I': '2', 'W': '3', 'E': '4', 'C': '5'}.get(ch, ch)
    ch = ch if '0' <= ch <= '5' else '0'  # default to '0'
    level = int(ch)
    level = (logging.NOTSET, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR,
             logging.CRITICAL)[level]
    if sys.flags.dev_mode:
        # Switch to debug mode, just like asyncio does in development mode.
        level = logging.DEBUG
    logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stdout)
    logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')
    del ch, level

# Defaults for the factorization pipeline, environment variables take precedence.
env_max_attempts = os.getenv('GFFACT_MAXATTEMPTS')  # check if variable GFFACT_MAXATTEMPTS is set
if not env_max_attempts:
    os.environ['GFFACT_MAXATTEMPTS'] = str(options.max_attempts)
    # NB: GFFACT_MAXATTEMPTS also set for subprocesses
logging.debug(f'Maximum number of splitting attempts set to {os.getenv("GFFACT_MAXATTEMPTS")}')

env_capacity = os.getenv('GFFACT_CAPACITY')  # check if variable GFFACT_CAPACITY is set
if not env_capacity:
    os.environ['GFFACT_CAPACITY'] = str(options.capacity)
    # NB: GFFACT_CAPACITY also set for subprocesses
logging.debug(f'Capacity of dense binary polynomials set to {os.getenv("GFFACT_CAPACITY")}')

del options, env_max_attempts, env_capacity
