import sys

from job_creator_stub.api.server import main

sys.exit(main())
