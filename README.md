# ssrclient

A small command-line client for an SSR service. It fetches entries for one or
more target environments (`dev`, `qa`, `uat`, `prod`). It can filter them by a
substring. It prints each entry once, with the URL the entry has in every
environment.

It uses only the standard library. Requests go through `urllib`, with a
30-second timeout.

## Installation

```
pip install .
```

## Usage

```
ssr-client [-e TARGET_ENVIRONMENT ...] [-u URL] [FILTER]
```

- `-e`, `--env`: the environments to retrieve. Separate them with commas
  (`dev,qa,uat,prod`) or give them as separate values. At most four values are
  accepted. If you leave the option out, all four environments are retrieved
  in the order `dev`, `qa`, `uat`, `prod`.
- `-u`, `--url`: the URL the entries are retrieved from. The command has a
  built-in default. Do not add the environment to the URL yourself. An
  `env=<environment>` query parameter is appended for each target at runtime,
  and any query the URL already has is kept.
- `FILTER`: the name, description and key of every entry are checked for this
  substring, without regard to case. If you leave it out, every entry is shown.
- `-V`, `--version`: print the version and exit.

Example:

```
ssr-client -e dev,prod -u https://ssr.example.com payments
```

The service must answer each request with a JSON array of objects. Each object
has the string fields `name`, `description`, `key` and `url`.

Entries from all environments are merged by `key`. Within one environment, a
later entry with the same key replaces the URL of an earlier one. Each merged
entry is printed in this form:

- its name and key;
- its description;
- one `environment \t url` line for each environment in which it has a URL, in
  the order `dev`, `qa`, `uat`, `prod`;
- a blank line.

Entries appear in the order their keys were first seen.

```
Payments (payments-api)
Handles card payments
dev 	 https://payments.dev.example.com
prod 	 https://payments.example.com

```

If a request fails, or a response is not a valid array of records, the command
writes `Unable to process request. ...` to standard error and exits with
status 1. An unknown environment name is a usage error: argparse reports it,
and the command exits with status 2.

## Using it from Python

```python
from ssrclient.environment import Environment
from ssrclient.retriever import SsrRetriever

ssr = SsrRetriever("https://ssr.example.com").add_targets(
    [Environment.DEV, Environment.UAT]
).get()
for result in ssr.set_pattern("payments").consolidate():
    print(result)
```

- `ssrclient.environment.Environment.parse("qa")` turns a name into an
  environment. It raises `InvalidEnvironmentTarget` for an unknown name.
- `ssrclient.retriever.fetch_records(url, target)` fetches the records for a
  single environment.
- `SsrRetriever.get()` raises `NoRecordsToProcess` when no targets were added.
- `Ssr`, `SsrRecord` and `SsrResult` live in `ssrclient.records`.
  `SsrResult.urls` maps each `Environment` to its URL, or to `None`.
- The command line is available as `ssrclient.cli.parse_args`,
  `ssrclient.cli.build_parser` and `ssrclient.cli.main`.
- Every error the package raises is a subclass of
  `ssrclient.errors.SsrError`.

## Running the tests

```
pip install .[test]
pytest
```