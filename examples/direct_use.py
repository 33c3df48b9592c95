"""Run the demo from python instead of the command line"""

import json

from mongo_arrays.config import DemoConfig
from mongo_arrays.data_model.documents import parse_document
from mongo_arrays.runner import ContainsQuery, Variant, run

config_path = "examples/config.json"

# Create a store from a config file
with open(config_path, "r") as config_file:
    config_json = json.load(config_file)
    config = DemoConfig(**config_json)
    store = config.store.init()

# Insert only the integer array document and look it up again
report = run(
    store,
    variant=Variant.INT_ARRAY,
    contains=ContainsQuery(field="some_array", value=3),
)
print("counts:", report.counts)

for raw in report.matches:
    print(raw["_id"], parse_document(raw))
