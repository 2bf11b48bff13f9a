"""Ordering and depth bookkeeping for gate sequences."""

from noise_lab.architecture.scheduler import circuit_depth, group_by_time_step, schedule_gates
from noise_lab.primitives.gates import Gate, GateKind


class TestScheduleGates:

    def test_sorted_by_time_step(self):
        gates = [
            Gate(GateKind.PAULI_X, qubit=0, time=4),
            Gate(GateKind.HADAMARD, qubit=1, time=0),
            Gate(GateKind.PAULI_Z, qubit=2, time=2),
        ]
        assert [g.time for g in schedule_gates(gates)] == [0, 2, 4]

    def test_ties_keep_input_order(self):
        first = Gate(GateKind.PAULI_X, qubit=0, time=1)
        second = Gate(GateKind.HADAMARD, qubit=0, time=1)
        early = Gate(GateKind.PAULI_Z, qubit=1, time=0)
        assert schedule_gates([first, second, early]) == (early, first, second)
        assert schedule_gates([second, first, early]) == (early, second, first)

    def test_empty(self):
        assert schedule_gates([]) == ()


class TestGroupByTimeStep:

    def test_moments_follow_schedule(self):
        gates = [
            Gate(GateKind.CNOT, qubit=1, time=3, control=0),
            Gate(GateKind.HADAMARD, qubit=0, time=0),
            Gate(GateKind.HADAMARD, qubit=2, time=0),
        ]
        moments = group_by_time_step(gates)
        assert [t for t, _ in moments] == [0, 3]
        assert len(moments[0][1]) == 2
        assert moments[1][1][0].kind is GateKind.CNOT


class TestCircuitDepth:

    def test_cnot_counts_on_both_qubits(self):
        gates = [
            Gate(GateKind.HADAMARD, qubit=0, time=0),
            Gate(GateKind.CNOT, qubit=1, time=1, control=0),
            Gate(GateKind.CNOT, qubit=2, time=2, control=1),
        ]
        assert circuit_depth(gates, 3) == {0: 2, 1: 2, 2: 1}

    def test_untouched_qubits_report_zero(self):
        assert circuit_depth([Gate(GateKind.PAULI_X, qubit=1)], 3) == {0: 0, 1: 1, 2: 0}
