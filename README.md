# rkcapture

These are the building blocks of a video capture service. They cover
command-line handling, build information, packed error numbers, and
validated parameter types for a hardware video encoder and its related
units. Everything here is pure Python and needs only the standard library.

## Modules

- `rkcapture.args` handles the command line.
  - `parse_args(argv)` takes the options without the program name. It
    returns an `Args` dataclass with the fields `width`, `height`,
    `input_path`, `output_path`, `bit_rate`, `gop`, `help_flag` and
    `version_flag`.
  - When an option is unknown or validation fails, it raises `ArgsError`,
    which is a `ValueError`.
  - `help_text()` returns the usage text.
- `rkcapture.version` holds the build information. `version_text()`
  returns the version, git commit and build time lines.
- `rkcapture.errcodes` holds the error codes.
  - `ErrLevel` and `ErrCode` list the common severities and error ids.
  - `def_err(module, level, errid)` packs a module id (8 bits), a level
    (3 bits) and an error id (13 bits) into a signed 32-bit error number.
    It raises `ValueError` when a field does not fit.
- `rkcapture.ratecontrol` covers rate control.
  - The enums are `RcQuality`, `RcMode` and `NaluType`.
  - The settings classes for CBR, VBR, AVBR and fixed-QP are `H264Cbr`,
    `H264Vbr`, `H264Avbr`, `H264FixQp`, `MjpegCbr`, `MjpegVbr` and
    `MjpegFixQp`. In the VBR classes the maximum bit rate defaults to 3/2
    of the average and the minimum to 1/2.
  - `RcAttr` checks that its settings class matches its mode.
  - The remaining classes are `H264Param`, `MjpegParam`, `RcParam`,
    `RcParam2` and `RcParam3`.
- `rkcapture.venc_types` holds the encoder enums: NAL and pack types,
  profiles, GOP mode, rotation, crop, scene, super-frame and frame-lost
  modes, among others.
- `rkcapture.venc_params` holds encoder channel parameter dataclasses, for
  example `GopAttr`, `SliceSplit`, `H264Dblk`, `VuiAspectRatio`,
  `IntraRefresh`, `SuperFrameCfg`, `HierarchicalQp`, `JpegParam` and
  `RoiBgFrameRate`. Each one checks its documented ranges on construction
  and raises `ValueError` when a value is outside them.
- `rkcapture.tde` covers the 2D engine.
  - The enums are `TdeErrCode`, `AluCmd`, `ColorKeyMode` and `BlendCmd`.
  - `TdeRect` has `right` and `bottom` properties.
- `rkcapture.avs` covers panoramic stitching.
  - The enums are `LutAccuracy`, `LutStep`, `FuseWidth`, `ProjectionMode`,
    `GainMode`, `AvsMode` and `ParamSource`.
  - `LutStep.pixels` and `FuseWidth.pixels` give the step and zone sizes
    in pixels.
  - `AvsMode.blends` reports whether a mode blends at the seam.
  - The dataclasses are `AvsRotation`, `AvsFov`, `LutStepAttr` and
    `OverlayAttr`.
- `rkcapture.aiisp` holds `AiIspCallback` and `AiIspAttr`.
  `AiIspAttr.update(ainr_param)` calls the callback with its private data.
  It raises `RuntimeError` when no callback is set.
- `rkcapture.ivs` holds the `IvsMode` flag and the `MdAttr`
  motion-detection thresholds.
- `rkcapture.pvs` covers picture stitching: `StitchMode`, `PvsPoint`,
  `PvsSize`, `PvsRect`, `PvsChnAttr` and `PvsChnParam`.
- `rkcapture.audio` covers audio decoding and filtering: `AdecMode`,
  `AdecErrCode`, `DecoderResult`, `AdecChnState` and `AudioFilterType`.

## Options understood by `parse_args`

| Short | Long         | Meaning                                      | Default |
|-------|--------------|----------------------------------------------|---------|
| `-w`  | `--width`    | frame width in pixels, within (0, 8192]      | —       |
| `-h`  | `--height`   | frame height in pixels, within (0, 8192]     | —       |
| `-i`  | `--input`    | input device path, e.g. `/dev/video0`        | —       |
| `-o`  | `--output`   | output socket path, e.g. `/tmp/capture.sock` | —       |
| `-b`  | `--bit-rate` | encoder bit rate, greater than 0             | `10240` |
| `-g`  | `--gop`      | group of pictures, greater than 0            | `60`    |
|       | `--help`     | print usage and skip validation              |         |
|       | `--version`  | print build information and skip validation  |         |

Numbers are read leniently. Leading digits are taken, and text with no
digits becomes 0. Width, height, input and output are required unless
`--help` or `--version` is given. An unknown option raises `ArgsError`.
Positional arguments are ignored.

## Example

```python
from rkcapture.args import ArgsError, help_text, parse_args

try:
    args = parse_args(["-w", "1920", "-h", "1080",
                       "-i", "/dev/video0", "-o", "/tmp/capture.sock"])
    print(args.width, args.height, args.bit_rate, args.gop)
except ArgsError as exc:
    print(exc)
    print(help_text())
```

```python
from rkcapture.errcodes import ErrCode, ErrLevel, def_err

code = def_err(6, ErrLevel.ERROR, ErrCode.NULL_PTR)
```

## What this package does not do

The package does not capture, encode or stream video. It has no capture
loop, no device access, no encoder calls and no socket output. It also
installs no command. It only provides the parsing, error-number and
parameter pieces that such a service is built on.

## Tests

The test suite uses pytest. Install it with the `test` extra.