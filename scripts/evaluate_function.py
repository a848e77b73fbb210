#!/usr/bin/env python3
import logging

import click

import ratfun.config
from ratfun.data.construct import make_rational_function
from ratfun.data.coefficients import Degree
from ratfun.data.scaled import ScaledRationalFunction
from ratfun.data.undefined import is_undefined
from ratfun.exceptions.configuration_error import ConfigurationError
from ratfun.exceptions.invalid_configuration_error import InvalidConfigurationError
from ratfun.input.parsing import parse_coefficients_string, parse_point
from ratfun.output.formatting import format_number, format_result


class ConfigState(object):
    def __init__(self):
        self.function = None
        self.precision = None


pass_state = click.make_pass_decorator(ConfigState, ensure=True)


def coefficients_option(name):
    def callback(ctx, param, value):
        try:
            return parse_coefficients_string(value)
        except ValueError as e:
            raise click.BadParameter(str(e))
    return click.option(name, required=True, callback=callback, help="comma separated coefficients, highest degree first")


def ensure_function_set(state):
    if state.function is None:
        raise click.UsageError("No function defined, use 'define' first")


def report(function, x, precision, name="f"):
    value = function.evaluate(x)
    if is_undefined(value):
        click.echo("Division by zero: the denominator of {} vanishes at x = {}".format(name, format_number(x)), err=True)
    click.echo("{}({}) = {}".format(name, format_number(x), format_result(value, precision)))
    return value


@click.group(chain=True)
@click.option("--config", help="configuration file to use instead of the default one")
@click.option("--logfile", default="ratfun.log")
@pass_state
def evaluate_function(state, config, logfile):
    logging.basicConfig(filename=logfile, format='%(levelname)s - %(name)s:%(message)s', level=logging.DEBUG)
    ch = logging.StreamHandler()
    ch.setLevel(logging.WARNING)
    logging.getLogger().addHandler(ch)
    logging.debug("Loading configuration")
    configuration = ratfun.config.load_configuration(config)
    state.precision = configuration.get_precision()
    logging.debug("Loaded configuration")


@evaluate_function.command()
@click.option("--degree", type=click.Choice([d.name for d in Degree]), default=Degree.linear.name)
@coefficients_option("--numerator")
@coefficients_option("--denominator")
@pass_state
def define(state, degree, numerator, denominator):
    try:
        state.function = make_rational_function(degree, numerator, denominator)
    except InvalidConfigurationError as e:
        raise click.UsageError(e.message)
    logging.info("Defined %s", state.function)
    return state


@evaluate_function.command()
@click.option("--by", "factor", type=float, required=True, help="scale factor")
@pass_state
def scale(state, factor):
    ensure_function_set(state)
    state.function = ScaledRationalFunction(state.function, factor)
    logging.info("Scaled to %s", state.function)
    return state


@evaluate_function.command()
@pass_state
def show(state):
    ensure_function_set(state)
    click.echo(state.function.render())
    click.echo(state.function.describe())
    return state


@evaluate_function.command()
@click.option("--at", "points", type=float, multiple=True, required=True, help="point to evaluate at")
@pass_state
def evaluate(state, points):
    ensure_function_set(state)
    for x in points:
        report(state.function, x, state.precision)
    return state


@evaluate_function.command()
@pass_state
def prompt(state):
    ensure_function_set(state)
    text = click.prompt("Enter a point x0 to evaluate the function at", type=str)
    try:
        x = parse_point(text)
    except ValueError as e:
        logging.debug("Rejected input %r: %s", text, e)
        click.echo("Invalid input. Please enter a number.")
        return state
    report(state.function, x, state.precision)
    return state


@evaluate_function.command()
@click.option("--at", "points", type=float, multiple=True, required=True, help="point to evaluate at")
@pass_state
def demo(state, points):
    configuration = ratfun.config.configuration
    try:
        functions = [
            ("Linear rational function", make_rational_function(
                Degree.linear,
                configuration.get_demo_coefficients("linear_numerator"),
                configuration.get_demo_coefficients("linear_denominator"))),
            ("Quadratic rational function", make_rational_function(
                Degree.quadratic,
                configuration.get_demo_coefficients("quadratic_numerator"),
                configuration.get_demo_coefficients("quadratic_denominator"))),
        ]
    except (InvalidConfigurationError, ConfigurationError) as e:
        raise click.UsageError(e.message)
    for title, function in functions:
        click.echo("--- {} ---".format(title))
        click.echo(function.describe())
        for x in points:
            report(function, x, state.precision)
        click.echo()
    return state


if __name__ == "__main__":
    evaluate_function()
