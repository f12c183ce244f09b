# dspkit

Small audio signal-processing building blocks that work one sample at a time.
Each generator or filter is a class that takes its sample rate when it is
created and returns the next output sample, as a Python float, from
`process()`. Parameters are changed with `set_*` methods.

The package is pure Python and has no dependencies.

## Installation

```
pip install .
```

For the test suite:

```
pip install .[test]
pytest
```

## Modules

### Utilities

- `dspkit.dsp` — helper functions and constants: `mtof`, `fclamp`,
  `onepole`, `median`, `soft_limit`, `soft_clip`, `soft_saturate`,
  `sanitize_float`, `pow10f`, `fastlog2f`, `fastlog10f`, `fastpower`,
  `fastroot`, `is_power2`, `get_next_power2`, and the band-limited step
  helpers `this_blep_sample`, `next_blep_sample`,
  `this_integrated_blep_sample`, `next_integrated_blep_sample`.
  Constants include `PI_F`, `TWOPI_F` and `RAND_MAX`.
- `dspkit.delayline` — `DelayLine(max_size)`: circular delay with `write`,
  linear `read`, `read_hermite`, `set_delay`, `reset` and an `allpass` step.
- `dspkit.dcblock` — `DcBlock`: removes the DC component of a signal.
- `dspkit.jitter` — `Jitter`: piecewise-linear random line, with
  `set_amp`, `set_cps_min` and `set_cps_max`.
- `dspkit.maytrig` — `may_trigger(prob)`: returns True with probability
  `prob`.
- `dspkit.metro` — `Metro(freq, sample_rate)`: `process()` returns True on
  each tick; `set_freq`, `reset` and a read-only `freq` property.
- `dspkit.samplehold` — `SampleHold` with `HoldMode.SAMPLE_HOLD` and
  `HoldMode.TRACK_HOLD`.
- `dspkit.smooth_random` — `SmoothRandomGenerator`: smoothly slewed random
  values in `[-1, 1]`.

### Noise

- `dspkit.whitenoise` — `WhiteNoise`: deterministic fast white noise.
- `dspkit.dust` — `Dust`: random impulses with adjustable density.
- `dspkit.clockednoise` — `ClockedNoise`: noise held at a clock rate, with
  `sync()` to force a new value.
- `dspkit.grainlet` — `GrainletOscillator`: shaped carrier grains times a
  formant sine.

### Physical modeling

- `dspkit.pluck` — `Pluck(sample_rate, npts, mode)` with `PluckMode.RECURSIVE`
  or `PluckMode.WEIGHTED_AVERAGE`. It is silent until the first non-zero
  trigger; `amp`, `freq`, `decay`, `damp` and `mode` are attributes.
- `dspkit.polypluck` — `PolyPluck(sample_rate, num_voices)`: round-robin
  pluck voices driven by MIDI note numbers, followed by a DC blocker.
- `dspkit.drip` — `Drip(sample_rate, dettack)`: dripping water;
  `process(True)` starts a new drip.
- `dspkit.resonator` — `ResonatorSvf` (a batch of parallel state-variable
  filters, with `FilterMode`) and `Resonator`, a modal body of up to 24
  modes with `set_freq`, `set_structure`, `set_brightness`, `set_damping`.

### Synthesis

- `dspkit.formantosc` — `FormantOscillator`: formant sine reset by a carrier.
- `dspkit.vosim` — `VosimOscillator`: two formant sines synced to a carrier.
- `dspkit.zoscillator` — `ZOscillator`: formant sine shaped by a carrier.
- `dspkit.harmonic_osc` — `HarmonicOscillator(sample_rate, num_harmonics=16)`:
  additive oscillator with per-harmonic amplitudes.
- `dspkit.oscillatorbank` — `OscillatorBank`: seven organ-style saw and
  square registers.
- `dspkit.variablesawosc` — `VariableSawOscillator`: saw morphing between a
  notch and a variable slope.
- `dspkit.variableshapeosc` — `VariableShapeOscillator`: saw/ramp/triangle
  to square, with optional hard sync.

## Examples

A retriggered saw driven by a clock:

```python
from dspkit.dsp import mtof
from dspkit.metro import Metro
from dspkit.variablesawosc import VariableSawOscillator

sample_rate = 48000.0

osc = VariableSawOscillator(sample_rate)
osc.set_freq(mtof(57))
osc.set_waveshape(0.0)
osc.set_pw(0.3)

clock = Metro(2.0, sample_rate)

block = []
for _ in range(int(sample_rate)):
    clock.process()
    block.append(0.3 * osc.process())
```

A single plucked string:

```python
from dspkit.pluck import Pluck, PluckMode

string = Pluck(48000.0, 256, PluckMode.RECURSIVE)
string.freq = 220.0
string.damp = 0.9
samples = [string.process(1.0 if n == 0 else 0.0) for n in range(4800)]
```

Polyphonic plucks on MIDI notes:

```python
from dspkit.polypluck import PolyPluck

voices = PolyPluck(48000.0, 4)
samples = [voices.process(1.0 if n == 0 else 0.0, 60) for n in range(4800)]
```

## Randomness

The noise sources and the random parts of `Jitter`, `Dust`, `Pluck`,
`Drip` and `may_trigger` draw from Python's `random` module, so calling
`random.seed(...)` makes their output repeatable. `WhiteNoise` uses its own
fixed generator and always produces the same sequence.

## What this package does not do

dspkit only computes samples. It does not open audio devices, read or write
sound files, handle MIDI input, or run a command-line program; getting the
samples to a speaker or a file is left to the caller. It also has no
general-purpose multi-waveform oscillator, FM voice, portamento filter,
fractal noise stack or mallet voice; `Resonator` is the modal body on its
own, without an exciter.