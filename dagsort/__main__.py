# dagsort

import argparse
import json
import pathlib
import sys
from typing import Dict, List, TextIO

import dagsort.config
from dagsort.config import MergeError
import dagsort.graph
from dagsort.graph import ChildLookupError, CycleError
from dagsort.providers import MappingProvider

class NoConfigError(RuntimeError):
    pass

class CustomFormatter(argparse.RawDescriptionHelpFormatter):
    def _format_action(self, action: argparse.Action) -> str:
        result = super()._format_action(action)
        if action.nargs == argparse.PARSER:
            # the subcommand group is hidden, de-indent by 2 spaces
            lines = result.split('\n')
            lines = [line[2:] for line in lines]
            result = '\n'.join(lines)
        return result

def get_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='dagsort',
                                     formatter_class=CustomFormatter)

    graph_parser = argparse.ArgumentParser(add_help=False)
    graph_parser.add_argument('-s', '--sorted',
                              action='store_true',
                              dest='sort_children',
                              help='visit children in sorted order')
    graph_parser.add_argument('-r', '--root',
                              action='append',
                              dest='roots',
                              default=[],
                              metavar='<vertex>',
                              help='vertex to start from, in addition to '
                                   'the roots of the configuration')
    graph_parser.add_argument('configs', nargs='+', metavar='<config>',
                              help='graph configuration file')

    subparser = parser.add_subparsers(dest='mode', required=True,
                                      metavar='<mode>', title=argparse.SUPPRESS)
    subparser.add_parser('walk', parents=[graph_parser],
                         help='topologically sort the graph, dependencies '
                              'first')
    subparser.add_parser('dot', parents=[graph_parser],
                         help='generate a directed graph in the DOT language')

    return parser

def load_config(config_paths: List[str]) -> Dict:
    config: Dict = { 'roots': [], 'graph': {} }
    for config_path_str in config_paths:
        config_path = pathlib.Path(config_path_str)
        try:
            with config_path.open() as f:
                config = dagsort.config.merge(config, json.load(f))
        except FileNotFoundError:
            raise NoConfigError(config_path)
    return config

def run(stdout: TextIO, raw_args: List[str]) -> int:
    args = get_parser().parse_args(raw_args)

    config   = load_config(args.configs)
    roots    = config['roots'] + args.roots
    provider = MappingProvider(config['graph'],
                               sorted if args.sort_children else list)
    vertices = dagsort.graph.sort(provider, roots)

    if args.mode == 'walk':
        print(' '.join(str(v) for v in vertices), file=stdout)
    else:
        assert(args.mode == 'dot')
        print('digraph G {', file=stdout)
        for v in vertices:
            for i in range(provider.child_count(v)):
                print(f'    "{v}" -> "{provider.child(v, i)}"', file=stdout)
        print('}', file=stdout)
    return 0

def main(stdout: TextIO    = sys.stdout,
         stderr: TextIO    = sys.stderr,
         args:   List[str] = sys.argv) -> int:
    try:
        return run(stdout, args[1:])
    except NoConfigError as e:
        print(f'Could not find config at: {e.args[0]}', file=stderr)
        return 1
    except MergeError as e:
        print(f'Conflicting values in configuration for: {e.args[0]}',
              file=stderr)
        return 1
    except CycleError as e:
        print('Cyclic dependency error: {}'.format(
                                       ' -> '.join(str(v) for v in e.path)),
              file=stderr)
        return -1
    except ChildLookupError as e:
        print('Could not find vertex:', e.args[0], file=stderr)
        return -1

if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
