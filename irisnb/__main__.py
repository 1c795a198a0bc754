# Copyright (C) 2026 Björn Lindqvist <bjourne@gmail.com>
from irisnb.report import main

main()
