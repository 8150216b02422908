# -*- test-case-name: gumball._test.test_visualize -*-
from __future__ import annotations
import argparse
import logging
import sys
from typing import Sequence

import attr
import graphviz

from ._machine import GumballMachine


def _gvquote(s):
    return '"{}"'.format(s.replace('"', r'\"'))


def _gvhtml(s):
    return '<{}>'.format(s)


def elementMaker(name, *children, **attrs):
    """
    Construct a string from the HTML element description.
    """
    formattedAttrs = ' '.join('{}={}'.format(key, _gvquote(str(value)))
                              for key, value in sorted(attrs.items()))
    formattedChildren = ''.join(children)
    return u'<{name} {attrs}>{children}</{name}>'.format(
        name=name,
        attrs=formattedAttrs,
        children=formattedChildren)


def tableMaker(inputLabel, outputLabels, port, _E=elementMaker):
    """
    Construct an HTML table to label a state transition.
    """
    colspan = {}
    if outputLabels:
        colspan['colspan'] = str(len(outputLabels))

    inputLabelCell = _E("td",
                        _E("font",
                           inputLabel,
                           face="menlo-italic"),
                        color="purple",
                        port=port,
                        **colspan)

    pointSize = {"point-size": "9"}
    outputLabelCells = [_E("td",
                           _E("font",
                              outputLabel,
                              **pointSize),
                           color="pink")
                        for outputLabel in outputLabels]

    rows = [_E("tr", inputLabelCell)]

    if outputLabels:
        rows.append(_E("tr", *outputLabelCells))

    return _E("table", *rows)


@attr.frozen
class Transition:
    inStateInitial: bool
    outStateInitial: bool
    inState: str
    outState: str
    inputName: str
    outputs: Sequence[str]


def transitions(automaton, inputAsString=repr,
                outputAsString=repr,
                stateAsString=repr):
    """
    Describe each of C{automaton}'s transitions with strings, in a stable
    order.
    """
    described = []
    for eachTransition in automaton.allTransitions():
        inState, inputSymbol, outState, outputSymbols = eachTransition
        described.append(Transition(
            inStateInitial=inState in automaton.initialStates,
            outStateInitial=outState in automaton.initialStates,
            inState=stateAsString(inState),
            outState=stateAsString(outState),
            inputName=inputAsString(inputSymbol),
            outputs=[outputAsString(outputSymbol)
                     for outputSymbol in outputSymbols],
        ))
    described.sort(key=lambda t: (t.inState, t.inputName))
    return described


def makeDigraph(automaton, inputAsString=repr,
                outputAsString=repr,
                stateAsString=repr):
    """
    Produce a L{graphviz.Digraph} object from an automaton.
    """
    digraph = graphviz.Digraph(graph_attr={'pack': 'true',
                                           'dpi': '100'},
                               node_attr={'fontname': 'Menlo'},
                               edge_attr={'fontname': 'Menlo'})

    nodes = set()
    def maybeAddState(name, isInitial):
        if name in nodes:
            return
        if isInitial:
            stateShape = "bold"
            fontName = "Menlo-Bold"
        else:
            stateShape = ""
            fontName = "Menlo"
        digraph.node(name,
                     fontname=fontName,
                     shape="ellipse",
                     style=stateShape,
                     color="blue")
        nodes.add(name)

    for n, transition in enumerate(transitions(automaton, inputAsString,
                                               outputAsString,
                                               stateAsString)):
        maybeAddState(transition.inState, transition.inStateInitial)
        maybeAddState(transition.outState, transition.outStateInitial)
        thisTransition = "t{}".format(n)

        port = "tableport"
        table = tableMaker(transition.inputName, transition.outputs,
                           port=port)

        digraph.node(thisTransition,
                     label=_gvhtml(table), margin="0.2", shape="none")

        digraph.edge(transition.inState,
                     '{}:{}:w'.format(thisTransition, port),
                     arrowhead="none")
        digraph.edge('{}:{}:e'.format(thisTransition, port),
                     transition.outState)

    return digraph


def tool(_progname=sys.argv[0],
         _argv=sys.argv[1:],
         _asDigraph=GumballMachine.asDigraph,
         _print=print,
         _basicConfig=logging.basicConfig):
    """
    Entry point for command line utility.
    """

    DESCRIPTION = """
    Visualize the gumball machine's states and transitions as a graphviz
    graph.
    """
    EPILOG = """
    You must have the graphviz tool suite installed.  Please visit
    http://www.graphviz.org for more information.
    """
    argumentParser = argparse.ArgumentParser(
        prog=_progname,
        description=DESCRIPTION,
        epilog=EPILOG)
    argumentParser.add_argument('--name', '-n',
                                help="Base name of the files written.",
                                default="gumball")
    argumentParser.add_argument('--quiet', '-q',
                                help="suppress output",
                                default=False,
                                action="store_true")
    argumentParser.add_argument('--verbose',
                                help="log each step at DEBUG level",
                                default=False,
                                action="store_true")
    argumentParser.add_argument('--dot-directory', '-d',
                                help="Where to write out .dot files.",
                                default=".gumball_visualize")
    argumentParser.add_argument('--image-directory', '-i',
                                help="Where to write out image files.",
                                default=".gumball_visualize")
    argumentParser.add_argument('--image-type', '-t',
                                help="The image format.",
                                choices=graphviz.FORMATS,
                                default='png')
    argumentParser.add_argument('--view', '-v',
                                help="View rendered graphs with"
                                " default image viewer",
                                default=False,
                                action="store_true")
    args = argumentParser.parse_args(_argv)

    if args.verbose:
        _basicConfig(level=logging.DEBUG)

    explicitlySaveDot = (args.dot_directory
                         and (not args.image_directory
                              or args.image_directory != args.dot_directory))
    if args.quiet:
        def _print(*args):
            pass

    name = args.name
    digraph = _asDigraph()

    if explicitlySaveDot:
        digraph.save(filename="{}.dot".format(name),
                     directory=args.dot_directory)
        _print(name, "...wrote dot into", args.dot_directory)

    if args.image_directory:
        deleteDot = not args.dot_directory or explicitlySaveDot
        digraph.format = args.image_type
        digraph.render(filename="{}.dot".format(name),
                       directory=args.image_directory,
                       view=args.view,
                       cleanup=deleteDot)
        if deleteDot:
            msg = "...wrote image into"
        else:
            msg = "...wrote image and dot into"
        _print(name, msg, args.image_directory)
