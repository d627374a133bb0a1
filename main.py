import csv
import sys
import argparse

from tqdm import tqdm

from constant import *
from Param import Param
from Technology import Technology, TECH_TABLE
from gate_calculator import compute_gate_params
from FunctionUnit import AreaConstraintError
from MultilevelSenseAmp import MultilevelSenseAmp

LAYOUT_OPTIONS = {"none": NONE, "magic": MAGIC, "override": OVERRIDE}
ROADMAPS = {"HP": HP, "LP": LP}


# Function to load configurations from a CSV file
def load_configurations(filename):
    config = {}
    with open(filename, mode='r', newline='') as csvfile:
        reader = csv.reader(csvfile)
        for row in reader:
            if len(row) == 2:
                key, value = row
                config[key.strip()] = value.strip()
    return config


def load_column_resistances(filename):
    columnResistance = []
    with open(filename, mode='r', newline='') as csvfile:
        reader = csv.reader(csvfile)
        for row in reader:
            columnResistance.extend(float(value) for value in row if value.strip())
    return columnResistance


def build_parser():
    parser = argparse.ArgumentParser(description='Multilevel sense amplifier area/latency/energy estimation.')

    # HW parameters
    parser.add_argument('--technode', type=int, default=32, help='Technology node in nm')
    parser.add_argument('--roadmap', type=str, default='LP', choices=list(ROADMAPS), help='Device roadmap')

    # Device parameters
    parser.add_argument('--resistanceOn', type=float, default=6e3, help='Cell on-state resistance (ohm)')
    parser.add_argument('--resistanceOff', type=float, default=6e3*17, help='Cell off-state resistance (ohm)')
    parser.add_argument('--numRowSubArray', type=int, default=128, help='Rows of the subarray')

    # Sense amp parameters
    parser.add_argument('--numCol', type=int, default=16, help='Number of sensed columns')
    parser.add_argument('--levelOutput', type=int, default=32, help='Number of output levels (ADC resolution + 1 bits)')
    parser.add_argument('--clkFreq', type=float, default=1e9, help='Clock frequency in Hz')
    parser.add_argument('--parallel', action='store_true', help='Read all rows of the subarray in parallel')
    parser.add_argument('--numColMuxed', type=int, default=8, help='Columns sharing one sense amp')
    parser.add_argument('--numRead', type=int, default=1, help='Number of read operations')

    # Floorplan
    parser.add_argument('--width', type=float, default=50e-6, help='Width constraint in m')
    parser.add_argument('--height', type=float, default=0.0, help='Height constraint in m')
    parser.add_argument('--layout', type=str, default='none', choices=list(LAYOUT_OPTIONS))

    # I/O
    parser.add_argument('--config', type=str, default=None, help='CSV of key,value overrides')
    parser.add_argument('--columns', type=str, default=None, help='CSV of column resistances (ohm)')
    parser.add_argument('--sweep', action='store_true', help='Evaluate every supported technology node')
    parser.add_argument('--record', type=str, default=None, help='Append results to this CSV file')
    return parser


def make_param(args, technode):
    param = Param()
    param.technode = technode
    param.deviceroadmap = ROADMAPS[args.roadmap]
    param.resistanceOn = args.resistanceOn
    param.resistanceOff = args.resistanceOff
    param.numRowSubArray = args.numRowSubArray
    return param


def run(args, technode, columnResistance):
    param = make_param(args, technode)
    tech = Technology()
    tech.Initialize(param.technode, param.deviceroadmap)
    gate_params = compute_gate_params(tech)

    amp = MultilevelSenseAmp(param, tech, gate_params)
    amp.Initialize(args.numCol, args.levelOutput, args.clkFreq, args.numCol, args.parallel)
    amp.CalculateArea(args.height, args.width, LAYOUT_OPTIONS[args.layout])
    amp.CalculateLatency(columnResistance, args.numColMuxed, args.numRead)
    amp.CalculatePower(columnResistance, args.numRead)
    return amp


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Override default or command-line values with values from the CSV
    if args.config:
        for key, value in load_configurations(args.config).items():
            if not hasattr(args, key):
                continue
            current = getattr(args, key)
            if isinstance(current, bool):
                setattr(args, key, value.lower() in ("1", "true", "yes"))
            elif isinstance(current, (int, float)):
                setattr(args, key, type(current)(float(value)))
            else:
                setattr(args, key, value)

    if args.columns:
        columnResistance = load_column_resistances(args.columns)
    else:
        columnResistance = [args.resistanceOn, (args.resistanceOn+args.resistanceOff)/2, args.resistanceOff]

    print("Arguments:")
    for arg in vars(args):
        print(f'    {arg}: {getattr(args, arg)}')

    nodes = sorted(TECH_TABLE[ROADMAPS[args.roadmap]], reverse=True) if args.sweep else [args.technode]
    try:
        for technode in tqdm(nodes, disable=len(nodes) == 1):
            amp = run(args, technode, columnResistance)
            amp.PrintProperty(f"MultilevelSenseAmp ({technode}nm {args.roadmap})")
            if args.record:
                amp.SaveOutput(f"MultilevelSenseAmp_{technode}nm_{args.roadmap}", args.record)
    except AreaConstraintError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
