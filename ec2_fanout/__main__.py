import sys

from ec2_fanout.run import main

sys.exit(main())
