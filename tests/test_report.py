from irisnb.dataset import class_name
from irisnb.report import accuracy, main, run
from math import isnan
from pytest import raises

TRUE = [1] * 10 + [2] * 10 + [3] * 10
GAUSSIAN = [1] * 10 \
    + [2, 2, 3, 2, 2, 2, 2, 2, 2, 2] \
    + [3, 3, 3, 3, 3, 3, 2, 3, 3, 3]
LITERAL = [1] * 10 \
    + [3, 3, 3, 2, 3, 2, 3, 1, 3, 2] \
    + [3, 2, 3, 3, 3, 3, 2, 3, 3, 3]

TINY = '''1 2 3 4 1
2 3 4 5 1
5 6 7 8 2
4 7 8 10 2
9 8 7 6 3
10 9 9 8 3
'''

def expected_output(predicted, right):
    lines = ['%s, %s' % (class_name(t), class_name(p))
             for t, p in zip(TRUE, predicted)]
    lines.append('model accuracy: %s' % (right / 30))
    lines += ['should be setosa: setosa',
              'should be versicolor: versicolor',
              'should be virginica: virginica']
    return lines

def test_accuracy():
    assert accuracy(3, 1) == 0.75
    assert accuracy(0, 5) == 0.0
    assert isnan(accuracy(0, 0))

def test_run(capsys):
    acc = run()
    assert acc == 28 / 30
    lines = capsys.readouterr().out.splitlines()
    assert lines == expected_output(GAUSSIAN, 28)

def test_run_literal(capsys):
    acc = run(literal = True)
    assert acc == 21 / 30
    lines = capsys.readouterr().out.splitlines()
    assert lines == expected_output(LITERAL, 21)

def test_verbose(capsys):
    run(verbose = True)
    out = capsys.readouterr().out
    assert '120 training and 30 test records' in out
    assert 'Fitting GaussianClassifier' in out
    assert 'prior 0.333, 4 statistics pairs' in out

def test_main(capsys):
    main([])
    lines = capsys.readouterr().out.splitlines()
    assert lines == expected_output(GAUSSIAN, 28)

    main(['--literal'])
    lines = capsys.readouterr().out.splitlines()
    assert lines == expected_output(LITERAL, 21)

def test_main_missing_file(tmp_path):
    path = str(tmp_path / 'missing.dat')
    with raises(SystemExit) as e:
        main(['--train', path])
    assert e.value.code.startswith('Cannot read %s' % path)

def test_main_bad_file(tmp_path):
    path = tmp_path / 'bad.dat'
    path.write_text('5.1 3.5 1.4 0.2 1\n5.1 3.5 1.4 0.2 7\n')
    with raises(SystemExit) as e:
        main(['--test', str(path)])
    assert 'line 2' in e.value.code

def test_main_too_few_samples(tmp_path):
    path = tmp_path / 'tiny.dat'
    path.write_text(TINY)
    with raises(SystemExit) as e:
        main(['--literal', '--train', str(path)])
    assert e.value.code.startswith('Class 1: Index 2 out of range')

    # The textbook algorithm copes fine.
    main(['--train', str(path)])

def test_main_zero_stdev(tmp_path):
    # The first feature of class 1 is constant.
    path = tmp_path / 'flat.dat'
    path.write_text('1 2 3 4 1\n1 3 4 5 1\n' + TINY.split('\n', 2)[2])
    with raises(SystemExit) as e:
        main(['--train', str(path)])
    assert e.value.code.startswith('Class 1: Standard deviation 0 is zero')
