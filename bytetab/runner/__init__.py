# -----------------------------------------------------------------------------
# es7s/bytetab [Configurable byte table writer]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from ._abstract import AbstractRunner

from .dump import DumpRunner
from .demo import DemoRunner
from .version import VersionRunner

from .factory import RunnerFactory
