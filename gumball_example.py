from gumball import GumballMachine


def tracer(oldState, input, newState):
    print("  [{} --{}--> {}]".format(oldState.name, input.value,
                                     newState.name))


machine = GumballMachine(2)
machine.setTrace(tracer)
print(machine)
machine.insertQuarter()
machine.insertQuarter()
machine.turnCrank()
machine.ejectQuarter()
machine.insertQuarter()
machine.turnCrank()
print(machine)
machine.insertQuarter()
machine.refill()
print(machine)
