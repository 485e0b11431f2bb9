"""Host resource sampling, ring buffers and the statistics HTTP endpoint."""