import pytest

from constant import *
from Param import Param
from Technology import Technology
from gate_calculator import compute_gate_params
from MultilevelSenseAmp import MultilevelSenseAmp


@pytest.fixture
def make_amp():
    """Factory for an uninitialized sense amp on a given node/roadmap."""
    def _make(technode=130, roadmap=LP, resistanceOn=1000, resistanceOff=100000, numRowSubArray=128):
        param = Param()
        param.technode = technode
        param.deviceroadmap = roadmap
        param.resistanceOn = resistanceOn
        param.resistanceOff = resistanceOff
        param.numRowSubArray = numRowSubArray
        tech = Technology()
        # nodes without a tech entry still get geometry from 32nm
        tech.Initialize(technode if technode in (130, 90, 65, 45, 32, 22, 14, 10, 7) else 32, roadmap)
        gate_params = compute_gate_params(tech)
        return MultilevelSenseAmp(param, tech, gate_params)
    return _make


@pytest.fixture
def amp(make_amp):
    amp = make_amp()
    amp.Initialize(8, 4, 1e9, 8, False)
    return amp
