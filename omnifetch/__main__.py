#!/usr/bin/env python3
from .main import main

main()
