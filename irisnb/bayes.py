# Copyright (C) 2026 Björn Lindqvist <bjourne@gmail.com>
#
# Gaussian naive Bayes classifiers. Using consistent variable names:
#
#   X: list of samples
#   Y: list of classes for a list of samples
#   x: one sample, a feature vector
#   c: a class, numbered from 1
#
# Two flavors are implemented. GaussianClassifier is the textbook
# algorithm: one mean and one standard deviation per feature, estimated
# over all samples of the class. LiteralClassifier reproduces an older
# program whose results we want to be able to compare against. It
# estimates one mean and one standard deviation per *sample* (over the
# sample's own features) and, when scoring feature i, reads the pair
# at index i + n // 5 where n is the number of pairs.
from collections import namedtuple
from numpy import argmax, array, asarray, nonzero, prod
from irisnb.dataset import N_CLASSES
from irisnb.stats import mean, prob_of, stdev

ClassStatistics = namedtuple('ClassStatistics',
                             ['means', 'stdevs', 'prior'])

class StatisticsIndexError(IndexError):
    def __init__(self, message, index):
        super().__init__(message)
        self.index = index

class ZeroStdevError(ValueError):
    def __init__(self, message, index):
        super().__init__(message)
        self.index = index

def zero_stdev(j):
    fmt = 'Standard deviation %d is zero, the density is undefined.'
    raise ZeroStdevError(fmt % j, j)

def class_samples(X, Y, c):
    return X[Y == c]

def class_statistics(X, Y, c):
    X_c = class_samples(X, Y, c)
    if len(X_c) == 0:
        raise ValueError('No training samples for class %d.' % c)
    return ClassStatistics(mean(X_c), stdev(X_c), len(X_c) / len(X))

def sample_statistics(X, Y, c):
    X_c = class_samples(X, Y, c)
    means = array([mean(x) for x in X_c])
    stdevs = array([stdev(x) for x in X_c])
    return ClassStatistics(means, stdevs, len(X_c) / len(X))

def class_probability(x, stats):
    zeros = nonzero(stats.stdevs == 0)[0]
    if len(zeros):
        zero_stdev(zeros[0])
    return prod(prob_of(x, stats.means, stats.stdevs)) * stats.prior

def literal_class_probability(x, stats):
    n = len(stats.means)
    ofs = n // 5
    p = 1.0
    for i, v in enumerate(x):
        j = i + ofs
        if j >= n:
            fmt = 'Index %d out of range for %d statistics pairs.'
            raise StatisticsIndexError(fmt % (j, n), j)
        if stats.stdevs[j] == 0:
            zero_stdev(j)
        p *= prob_of(v, stats.means[j], stats.stdevs[j])
    return p * stats.prior

class GaussianClassifier:
    fit_class = staticmethod(class_statistics)
    class_probability = staticmethod(class_probability)

    def __init__(self, n_classes = N_CLASSES):
        self.n_classes = n_classes
        self.stats = None

    def fit(self, X, Y):
        if self.stats is not None:
            raise ValueError('Already fitted, use a new instance.')
        X = asarray(X, dtype = float)
        Y = asarray(Y)
        if len(X) == 0:
            raise ValueError('No training samples.')
        self.stats = [self.fit_class(X, Y, c)
                      for c in range(1, self.n_classes + 1)]

    def scores(self, x):
        if self.stats is None:
            raise ValueError('Classifier is not fitted.')
        x = asarray(x, dtype = float)
        scores = []
        for c, stats in enumerate(self.stats, 1):
            try:
                scores.append(self.class_probability(x, stats))
            except (StatisticsIndexError, ZeroStdevError) as e:
                fmt = 'Class %d: %s'
                raise type(e)(fmt % (c, e), e.index) from e
        return scores

    def predict_point(self, x):
        # argmax picks the first, i.e. lowest, class on ties.
        return int(argmax(self.scores(x))) + 1

    def predict(self, X):
        for x in X:
            yield self.predict_point(x)

class LiteralClassifier(GaussianClassifier):
    fit_class = staticmethod(sample_statistics)
    class_probability = staticmethod(literal_class_probability)
