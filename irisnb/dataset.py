# Copyright (C) 2026 Björn Lindqvist <bjourne@gmail.com>
#
# Loading of labeled records. A data file has one record per line:
#
#     f1 f2 ... fn label
#
# separated by any whitespace, where the features are reals and the
# label is a class number between 1 and the number of classes. There
# is no header and nothing else is tolerated.
from collections import namedtuple
from enum import IntEnum
from numpy import array
from os.path import dirname, join

N_FEATURES = 4
N_CLASSES = 3

DATA_DIR = join(dirname(__file__), 'data')
TRAIN_PATH = join(DATA_DIR, 'iris_training.dat')
TEST_PATH = join(DATA_DIR, 'iris_test.dat')
EXAMPLES_PATH = join(DATA_DIR, 'examples.dat')

class Species(IntEnum):
    SETOSA = 1
    VERSICOLOR = 2
    VIRGINICA = 3

def class_name(label):
    return Species(label).name.lower()

Record = namedtuple('Record', ['features', 'label'])

class ParseError(Exception):
    def __init__(self, message, path, line):
        super().__init__(message)
        self.path = path
        self.line = line

def parse_error(path, line, fmt, *args):
    message = '%s, line %d: ' % (path, line) + fmt % args
    raise ParseError(message, path, line)

def parse_record(text, n_features = N_FEATURES, n_classes = N_CLASSES,
                 path = '<string>', line = 1):
    def bad(fmt, *args):
        parse_error(path, line, fmt, *args)

    toks = text.split()
    if len(toks) != n_features + 1:
        bad('expected %d fields, got %d.', n_features + 1, len(toks))
    features = []
    for tok in toks[:n_features]:
        try:
            features.append(float(tok))
        except ValueError:
            bad('`%s` is not a number.', tok)
    try:
        label = int(toks[n_features])
    except ValueError:
        bad('`%s` is not a class label.', toks[n_features])
    if not 1 <= label <= n_classes:
        bad('class label %d is not between 1 and %d.', label, n_classes)
    return Record(tuple(features), label)

def load_records(path, n_features = N_FEATURES, n_classes = N_CLASSES):
    """Reads all records of a file, in file order.

    Raises OSError if the file can't be read and ParseError on the
    first malformed line.
    """
    with open(path, 'rb') as f:
        data = f.read()
    # Only \n ends a line. A final newline does not start a new one.
    lines = data.split(b'\n')
    if lines[-1] == b'':
        lines.pop()
    records = []
    for i, l in enumerate(lines, 1):
        try:
            text = l.decode('utf-8')
        except UnicodeDecodeError:
            parse_error(path, i, 'not UTF-8 text.')
        records.append(parse_record(text, n_features, n_classes, path, i))
    return records

def load_dataset(train_path = TRAIN_PATH, test_path = TEST_PATH,
                 n_features = N_FEATURES, n_classes = N_CLASSES):
    training = load_records(train_path, n_features, n_classes)
    test = load_records(test_path, n_features, n_classes)
    return training, test

def to_arrays(records, n_features = N_FEATURES):
    X = array([r.features for r in records],
              dtype = float).reshape(-1, n_features)
    Y = array([r.label for r in records], dtype = int)
    return X, Y
