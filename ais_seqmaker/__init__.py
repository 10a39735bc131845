"""
Tools for turning per vessel AIS position reports into fixed rate,
gap aware sequences.

Includes a `seqmaker` command line interface to run the algorithm.
"""


from ais_seqmaker.geo import Point, Position, distance, is_valid_mmsi  # noqa: F401
from ais_seqmaker.handlers import (HANDLERS, SequenceCounter,  # noqa: F401
                                   SequenceDiff, SequenceMaker, make_handler)
from ais_seqmaker.records import FormatError, RecordReader  # noqa: F401
from ais_seqmaker.segment import (ResampleError, SplitArgs,  # noqa: F401
                                  drop_rate, interpolate, split)
from ais_seqmaker.sequencer import Sequencer  # noqa: F401

__version__ = "1.0.0"

__author__ = "ais-seqmaker developers"
__license__ = """
Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""
