import getopt
import os
import sys

import bstmap
from . import log
from . import recordfile
from .comparator import natural_order, dname_order
from .exception import BSTMapError
from .tree.bstree import BinarySearchTree, TreePrintMode

SAMPLE_VALUES = ["cat", "dog", "chicken", "hen"]

KEY_TYPES = {
        'int'   : (recordfile.int_key, natural_order),
        'str'   : (recordfile.str_key, natural_order),
        'dname' : (recordfile.dname_key, dname_order),
        }

PRINT_MODES = {
        'in'   : TreePrintMode.INORDER,
        'pre'  : TreePrintMode.PREORDER,
        'post' : TreePrintMode.POSTORDER,
        }

def sample_records(key_parser):
    return [(key_parser(str(i)), v) for i, v in enumerate(SAMPLE_VALUES)]

def read_input_file(filename, key_parser):
    try:
        return recordfile.records_from_file(filename, key_parser)
    except IOError as e:
        log.fatal("unable to read input file: \n", str(e))

def build_tree(records, comparator, print_mode, out):
    tree = BinarySearchTree(comparator, print_mode=print_mode)
    for i, (k, v) in enumerate(records):
        tree.insert(k, v)
        out.write("Length after insert of values[{0:d}]: {1:d}\n"
                .format(i, tree.length))
    return tree

def delete_keys(tree, keys, key_parser, out):
    for s in keys:
        payload = tree.delete(key_parser(s))
        if payload is None:
            log.debug1("key ", s, " not in tree")
            out.write("Key {0:s}: not found\n".format(s))
        else:
            out.write("Deleted key {0:s}: {1!s}\n".format(s, payload))

def bstdemo_main(argv):
    log.logger = log.Logger()
    options, filename = parse_arguments(argv)
    out = sys.stdout
    key_parser, comparator = KEY_TYPES[options['key_type']]

    try:
        if filename is None:
            log.info("no input file given, using sample records")
            records = sample_records(key_parser)
        else:
            records = read_input_file(filename, key_parser)

        tree = build_tree(records, comparator, options['order'], out)
        log.debug1("tree holds ", tree.length, " records")
        if options['delete']:
            delete_keys(tree, options['delete'], key_parser, out)
        tree.print(file=out)
    except BSTMapError as e:
        log.fatal(e)
    return 0

def default_options():
    opts = {
            'order' : TreePrintMode.INORDER,
            'key_type' : 'int',
            'delete' : [],
            }
    return opts

def invalid_argument(opt, arg):
    log.fatal_exit(2, "invalid " + opt + " argument `" + str(arg) + "'")

def parse_arguments(argv):
    long_opts = [
            'color=',
            'delete=',
            'help',
            'key-type=',
            'order=',
            'verbose',
            'version'
    ]
    options = default_options()
    opts = 'd:hk:o:v'
    try:
        opts, args = getopt.gnu_getopt(argv[1:], opts, long_opts)
    except getopt.GetoptError as err:
        log.fatal_exit(2, err, "\n", "Try `",
                str(os.path.basename(argv[0])),
                " --help' for more information.")

    for opt, arg in opts:
        if opt in ('-h', '--help'):
            usage(os.path.basename(argv[0]))
            sys.exit(0)

        elif opt in ('-d', '--delete'):
            options['delete'].append(arg)

        elif opt in ('-k', '--key-type'):
            if arg not in KEY_TYPES:
                invalid_argument(opt, arg)
            options['key_type'] = arg

        elif opt in ('-o', '--order'):
            try:
                options['order'] = PRINT_MODES[arg]
            except KeyError:
                invalid_argument(opt, arg)

        elif opt in ('-v', '--verbose'):
            log.logger.loglevel += 1

        elif opt in ('--color',):
            try:
                log.logger.set_colors(arg)
            except ValueError:
                invalid_argument(opt, arg)

        elif opt in ('--version',):
            version()
            sys.exit(0)

        else:
            invalid_argument(opt, "")

    if len(args) > 1:
        log.fatal_exit(2, 'too many arguments', "\n", "Try `",
                str(os.path.basename(argv[0])),
                " --help' for more information.")
    filename = args[0] if args else None
    return (options, filename)

def version():
    sys.stdout.write("bstdemo " + bstmap.__version__ + "\n")

def usage(program_name):
    sys.stdout.write('Usage: {0:s} [option]... [file]'.format(program_name))
    sys.stdout.write(
'''
Load key/payload records into a binary search tree and print it

Without a file, the sample records 0 cat, 1 dog, 2 chicken and 3 hen are used.
Each line of the file holds a key and a payload separated by whitespace.
Empty lines and lines starting with ';' or '#' are ignored.

Options:
      --version              show program's version number and exit
  -h, --help                 show this help message and exit
  -v, --verbose              increase verbosity level (use multiple times for
                               greater effect)
      --color=WHEN           colorize output; WHEN can be 'auto' (default),
                               'always' or 'never'.

Tree:
  -k, --key-type=TYPE        how keys are parsed and ordered; TYPE can be
                               'int' (default), 'str' or 'dname' (canonical
                               DNS name order)
  -o, --order=ORDER          print order; ORDER can be 'in' (default), 'pre'
                               or 'post'
  -d, --delete=KEY           delete KEY after loading the records (may be
                               given multiple times)
''')

def main():
    try:
        sys.exit(bstdemo_main(sys.argv))
    except KeyboardInterrupt:
        sys.stderr.write("\nreceived SIGINT, terminating\n")
        sys.exit(3)
