# Copyright (C) 2026 Björn Lindqvist <bjourne@gmail.com>
#
# Trains a Gaussian naive Bayes classifier on the Iris training set,
# reports how it does on the test set and classifies a few examples.
"""Iris naive Bayes

Usage:
    irisnb [options]

Options:
    -h --help               show this screen
    -v --verbose            print more output
    --train=<path>          training records (bundled Iris set if omitted)
    --test=<path>           test records (bundled Iris set if omitted)
    --examples=<path>       example records (bundled examples if omitted)
    --literal               use per-record statistics like the old program
"""
from docopt import docopt
from sys import exit
from irisnb.bayes import (GaussianClassifier, LiteralClassifier,
                          StatisticsIndexError, ZeroStdevError)
from irisnb.dataset import (EXAMPLES_PATH, N_CLASSES, N_FEATURES,
                            TEST_PATH, TRAIN_PATH,
                            ParseError,
                            class_name, load_dataset, load_records,
                            to_arrays)

def my_print(verbose, s):
    if verbose:
        print(s)

def accuracy(right, wrong):
    total = right + wrong
    if total == 0:
        return float('nan')
    return right / total

def report_test(clf, records):
    right = 0
    wrong = 0
    for r in records:
        predicted = clf.predict_point(r.features)
        print('%s, %s' % (class_name(r.label), class_name(predicted)))
        if predicted == r.label:
            right += 1
        else:
            wrong += 1
    acc = accuracy(right, wrong)
    print('model accuracy: %s' % acc)
    return acc

def report_examples(clf, records):
    for r in records:
        predicted = clf.predict_point(r.features)
        print('should be %s: %s' % (class_name(r.label),
                                    class_name(predicted)))

def describe(clf, verbose):
    for c, stats in enumerate(clf.stats, 1):
        my_print(verbose, '%-10s prior %.3f, %d statistics pairs' %
                 (class_name(c), stats.prior, len(stats.means)))

def run(train_path = TRAIN_PATH, test_path = TEST_PATH,
        examples_path = EXAMPLES_PATH, literal = False, verbose = False):
    training, test = load_dataset(train_path, test_path,
                                  N_FEATURES, N_CLASSES)
    examples = load_records(examples_path, N_FEATURES, N_CLASSES)
    my_print(verbose, '%d training and %d test records' %
             (len(training), len(test)))

    clf = LiteralClassifier() if literal else GaussianClassifier()
    my_print(verbose, 'Fitting %s' % type(clf).__name__)
    clf.fit(*to_arrays(training, N_FEATURES))
    describe(clf, verbose)

    acc = report_test(clf, test)
    report_examples(clf, examples)
    return acc

def main(argv = None):
    args = docopt(__doc__, argv = argv, version = 'Iris naive Bayes 1.0')
    try:
        run(args['--train'] or TRAIN_PATH,
            args['--test'] or TEST_PATH,
            args['--examples'] or EXAMPLES_PATH,
            args['--literal'], args['--verbose'])
    except OSError as e:
        exit('Cannot read %s: %s' % (e.filename, e.strerror))
    except (ParseError, StatisticsIndexError, ZeroStdevError,
            ValueError) as e:
        exit(str(e))

if __name__ == '__main__':
    main()
