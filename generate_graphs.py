import matplotlib.pyplot as plt
from simulator import VirtualMemorySimulator

algorithms = ['rand', 'fifo']
programs = ['sort', 'scan', 'focus']
num_pages = 32
page_size = 256
frame_counts = [2, 4, 8, 12, 16, 20, 24, 28, 32]
results = {}

print("Running simulations...")
for program in programs:
    results[program] = {}
    for algorithm in algorithms:
        results[program][algorithm] = []
        for num_frames in frame_counts:
            simulator = VirtualMemorySimulator(num_pages, num_frames, algorithm=algorithm,
                                               random_seed=1, page_size=page_size)
            simulator.run_program(program)
            simulator.close()
            results[program][algorithm].append(simulator.stats.as_dict())

metrics = ['page_faults', 'disk_reads', 'disk_writes']
titles = ['Page Faults', 'Disk Reads', 'Disk Writes']

for program in programs:
    fig, axes = plt.subplots(1, 3, figsize=(15, 5))
    fig.suptitle(f'Replacement Policy Comparison: {program} ({num_pages} pages)',
                 fontsize=14, fontweight='bold')

    for idx, (metric, title) in enumerate(zip(metrics, titles)):
        ax = axes[idx]
        for algorithm in algorithms:
            values = [r[metric] for r in results[program][algorithm]]
            ax.plot(frame_counts, values, marker='o', label=algorithm)

        ax.set_title(title)
        ax.set_xlabel('Frames')
        ax.set_xticks(frame_counts)
        ax.grid(alpha=0.3)
        ax.legend()

    plt.tight_layout()
    plt.savefig(f'{program}_comparison.png', dpi=300, bbox_inches='tight')
    plt.close(fig)
    print(f"Graph saved as '{program}_comparison.png'")
