"""Fastarith is a Python package for fast exact arithmetic with univariate polynomials.

The algorithms are built on the transposition principle: the transpose of
multiplication by a fixed polynomial (middle product) and the transpose of
reduction modulo a fixed polynomial (linear-recurrence extension) combine into
fast algorithms for problems that look unrelated to multiplication.

Polynomials live over prime fields GF(p), see modules finfields and gfpx.
Module dual converts between monomial and dual (trace) coordinates in k[x]/(P).
Module transposed provides transposed multiplication and remainder primitives.
Module composed recovers minimal polynomials via Berlekamp-Massey and builds the
composed product R = P⊙Q, whose roots are the pairwise products of roots of P and Q.
Module isomorphism implements the ring isomorphism k[x,y]/(P,Q) → k[z]/(R) sending
xy to z and its inverse, both naively and with a baby-step/giant-step scheme.
"""

__version__ = '0.1.0'
__license__ = 'MIT License'

import os
import sys
import argparse
import logging


def get_arg_parser():
    """Return parser for command line arguments used to configure fastarith."""
    parser = argparse.ArgumentParser(add_help=False, allow_abbrev=False)

    group = parser.add_argument_group('fastarith configuration')
    group.add_argument('--log-level', type=str, metavar='ll',
                       help='logging level ll=debug/info(default)/warning/error')
    group.add_argument('--no-log', action='store_true',
                       help='disable logging messages')
    group.add_argument('--phi-threshold', type=int, metavar='t',
                       help='use fast isomorphism for deg(P)*deg(Q) >= t (default 64)')

    parser.set_defaults(log_level='info', phi_threshold=64)
    return parser


if os.getenv('READTHEDOCS') != 'True':
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
            level = logging.DEBUG
        logging.basicConfig(format='{asctime} {message}', style='{', level=level, stream=sys.stdout)
        logging.debug(f'Set logging level to {level}: {logging.getLevelName(level)}')
        del ch, level

    env_phi_threshold = os.getenv('FASTARITH_PHI_THRESHOLD')  # check if variable is set
    if not env_phi_threshold:
        os.environ['FASTARITH_PHI_THRESHOLD'] = str(options.phi_threshold)
        # NB: FASTARITH_PHI_THRESHOLD also set for subprocesses
    logging.debug(f'Isomorphism threshold set to {os.getenv("FASTARITH_PHI_THRESHOLD")}')

    del options, env_phi_threshold
