# Copyright (C) 2026 Björn Lindqvist <bjourne@gmail.com>
#
# Gaussian naive Bayes for the Iris species problem. You run it like
# this:
#
#     python -m irisnb [--literal] [-v]
#
# which trains on the bundled training set, prints the true and
# predicted species of every test record, the accuracy and the
# predictions for three example flowers.
